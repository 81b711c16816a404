"""Text conversions shared by command rendering and menu label handling."""

ASCII_ELLIPSIS = '...'
UNICODE_ELLIPSIS = '…'

# Characters that must be preceded by a backslash inside a quoted command string:
_ESCAPED_CHARS = frozenset('\b\f\n\r\t\\"')


def escape_string(text: str) -> str:
    """Returns text with a backslash inserted before each backspace, form feed, newline, carriage return, tab,
    backslash and double quote, so that it can be placed within double quotes in a command string."""
    return ''.join(f'\\{char}' if char in _ESCAPED_CHARS else char for char in text)


def quote_string(text: str | None) -> str:
    """Escapes text and wraps it in double quotes. Missing text becomes an empty string."""
    if text is None:
        return '""'
    return f'"{escape_string(text)}"'


def format_float(value: float, precision: int) -> str:
    """Formats a float with a fixed number of decimal places.

    The % operator never consults the process locale, so the decimal separator is always a period."""
    return '%.*f' % (precision, value)


def strip_mnemonics(label: str) -> str:
    """Removes menu mnemonic markers from a label.

    Single underscores are removed, double underscores become a single literal underscore, and a parenthesized
    mnemonic like "(_F)" is removed entirely."""
    stripped: list[str] = []
    past_bracket = False
    i = 0
    while i < len(label):
        char = label[i]
        if char == '_':
            if i + 1 < len(label) and label[i + 1] == '_':
                stripped.append('_')
                i += 2
                continue
            i += 1
            if past_bracket and i + 1 < len(label) and label[i + 1] == ')':
                stripped.pop()
                i += 2
                past_bracket = False
            continue
        stripped.append(char)
        past_bracket = char == '('
        i += 1
    return ''.join(stripped)


def strip_trailing_ellipsis(title: str) -> str:
    """Removes an ellipsis from the end of a title.

    Only the first ellipsis in the title is considered: three periods if present, otherwise the unicode
    ellipsis character. It is removed only if it ends the title."""
    index = title.find(ASCII_ELLIPSIS)
    ellipsis = ASCII_ELLIPSIS
    if index < 0:
        index = title.find(UNICODE_ELLIPSIS)
        ellipsis = UNICODE_ELLIPSIS
    if index >= 0 and index == len(title) - len(ellipsis):
        return title[:index]
    return title
