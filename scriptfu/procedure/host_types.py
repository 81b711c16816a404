"""Values the host passes in when it invokes a script procedure."""
from dataclasses import dataclass
from enum import IntEnum


class RunMode(IntEnum):
    """How a procedure was invoked. Always passed as the first invocation value."""
    INTERACTIVE = 0
    NONINTERACTIVE = 1
    WITH_LAST_VALS = 2


@dataclass(frozen=True)
class Image:
    """Reference to an open image."""
    id: int


@dataclass(frozen=True)
class Item:
    """Reference to anything that can be part of an image."""
    id: int


@dataclass(frozen=True)
class Drawable(Item):
    """Reference to an image item with pixel content."""


@dataclass(frozen=True)
class Layer(Drawable):
    """Reference to an image layer."""


@dataclass(frozen=True)
class Channel(Drawable):
    """Reference to an image channel."""


@dataclass(frozen=True)
class Vectors(Item):
    """Reference to an image path."""


@dataclass(frozen=True)
class Display:
    """Reference to a window displaying an image."""
    id: int
