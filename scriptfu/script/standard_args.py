"""Recognizes the display, image and item values that callers pass before a script's own arguments."""
import logging
from typing import Any, Sequence

from scriptfu.procedure.host_types import Image, Drawable, Layer, Channel, Vectors, Display
from scriptfu.script.arg_type import ArgType
from scriptfu.script.arg_value import ItemIdValue
from scriptfu.script.script import Script

logger = logging.getLogger(__name__)

# Host object classes accepted for each identifier argument type:
_HOST_CLASSES: dict[ArgType, type] = {
    ArgType.DISPLAY: Display,
    ArgType.IMAGE: Image,
    ArgType.DRAWABLE: Drawable,
    ArgType.LAYER: Layer,
    ArgType.CHANNEL: Channel,
    ArgType.VECTORS: Vectors
}

# Item types that may follow an image, in the order they are tried:
_ITEM_TYPE_ORDER = (ArgType.DRAWABLE, ArgType.LAYER, ArgType.CHANNEL, ArgType.VECTORS)


def _init_standard_arg(script: Script, invocation: Sequence[Any], arg_type: ArgType, index: int) -> bool:
    """Stores the identifier of invocation value `index + 1` in argument `index`, if the argument has the
    expected type and the value is a host object of that type."""
    if index >= script.n_args or len(invocation) <= index + 1:
        return False
    arg = script.get_arg(index)
    if arg.arg_type != arg_type:
        return False
    value = invocation[index + 1]
    if not isinstance(value, _HOST_CLASSES[arg_type]):
        return False
    arg.value = ItemIdValue(value.id)
    return True


def collect_standard_args(script: Script, invocation: Sequence[Any]) -> int:
    """Reads leading display, image and item values from a procedure invocation into a script's arguments.

    The invocation holds the run mode followed by one value for each script argument. A display may come first.
    An image may come first or follow the display, and only if an image was found, it may be followed by a
    drawable, layer, channel or vectors object. Each match requires both an argument of that type at that position
    and a host object of that type in the invocation.

    Returns
    -------
    int
        The number of leading arguments that were set, from 0 to 3.
    """
    assert script is not None
    assert invocation is not None
    with script.exclusive_access():
        consumed = 0
        if _init_standard_arg(script, invocation, ArgType.DISPLAY, consumed):
            consumed += 1
        if _init_standard_arg(script, invocation, ArgType.IMAGE, consumed):
            consumed += 1
            if any(_init_standard_arg(script, invocation, item_type, consumed) for item_type in _ITEM_TYPE_ORDER):
                consumed += 1
    logger.debug(f'{script.name}: collected {consumed} standard arguments')
    return consumed
