"""Renders script argument values as command text that the script interpreter can evaluate again."""
from typing import Any, Sequence

from scriptfu.script.script import Script
from scriptfu.util.shared_constants import DEFAULT_FLOAT_PRECISION


def _format_command(name: str, tokens: list[str]) -> str:
    return f'({" ".join([name, *tokens])})'


def get_command(script: Script, float_precision: int = DEFAULT_FLOAT_PRECISION) -> str:
    """Returns a command that calls the script with its current argument values.

    The command has the form `(script-name token_0 ... token_n-1)`, with exactly one token per declared
    argument. Numbers are always written with a period as the decimal separator.
    """
    assert script is not None
    with script.exclusive_access():
        tokens = [arg.value.to_token(float_precision) for arg in script.args]
        return _format_command(script.name, tokens)


def get_command_from_params(script: Script, invocation: Sequence[Any],
                            float_precision: int = DEFAULT_FLOAT_PRECISION) -> str:
    """Returns a command that calls the script with the values of a procedure invocation.

    Stored argument values are not used or changed. The invocation holds the run mode followed by one value for
    each script argument.
    """
    assert script is not None
    assert invocation is not None
    with script.exclusive_access():
        args = script.args
        assert len(invocation) >= len(args) + 1, (f'{script.name}: expected {len(args) + 1} invocation values, got'
                                                  f' {len(invocation)}')
        tokens = [arg.value.token_from_param(invocation[i + 1], float_precision) for i, arg in enumerate(args)]
        return _format_command(script.name, tokens)
