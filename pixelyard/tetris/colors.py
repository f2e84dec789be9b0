"""Block types and the colour palette of the falling-blocks game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BlockType(IntEnum):
    """Kinds of block on the board; NA marks an empty cell."""

    NA = 0
    I = 1  # noqa: E741
    O = 2  # noqa: E741
    T = 3
    Z = 4
    S = 5
    J = 6
    L = 7


class BlockColor(IntEnum):
    """Colours a block can have."""

    BLUE_GREEN = 0
    GOLD = 1
    PURPLE = 2
    RED = 3
    LIGHT_GREEN = 4
    BLUE = 5
    RED_ORANGE = 6


class OtherColor(IntEnum):
    """Colours used for everything that is not a block."""

    BLACK = 0
    BACKGROUND = 1
    GRAY = 2
    FOREGROUND = 3
    WHITE = 4


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0.0-1.0."""

    r: float
    g: float
    b: float

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> Color:
        """Build a colour from 0-255 components."""
        return cls(r / 255, g / 255, b / 255)

    def to_rgb255(self) -> tuple[int, int, int]:
        """The colour as 0-255 components."""
        return (round(self.r * 255), round(self.g * 255), round(self.b * 255))


_BLOCK_COLORS = {
    BlockColor.BLUE_GREEN: Color.from_rgb255(91, 203, 196),
    BlockColor.GOLD: Color.from_rgb255(255, 196, 0),
    BlockColor.PURPLE: Color.from_rgb255(199, 146, 234),
    BlockColor.RED: Color.from_rgb255(255, 81, 109),
    BlockColor.LIGHT_GREEN: Color.from_rgb255(194, 233, 130),
    BlockColor.BLUE: Color.from_rgb255(116, 177, 255),
    BlockColor.RED_ORANGE: Color.from_rgb255(247, 118, 105),
}

_OTHER_COLORS = {
    OtherColor.BLACK: Color.from_rgb255(0, 0, 0),
    OtherColor.BACKGROUND: Color.from_rgb255(38, 50, 56),
    OtherColor.GRAY: Color.from_rgb255(84, 109, 122),
    OtherColor.FOREGROUND: Color.from_rgb255(205, 211, 188),
    OtherColor.WHITE: Color.from_rgb255(255, 255, 255),
}

_TYPE_COLORS = {
    BlockType.I: BlockColor.BLUE_GREEN,
    BlockType.O: BlockColor.GOLD,
    BlockType.T: BlockColor.PURPLE,
    BlockType.Z: BlockColor.RED,
    BlockType.S: BlockColor.LIGHT_GREEN,
    BlockType.J: BlockColor.BLUE,
    BlockType.L: BlockColor.RED_ORANGE,
}


def type_to_color(block_type: BlockType | int) -> Color:
    """The colour a cell of the given block type is drawn in."""
    kind = BlockType(block_type)
    if kind is BlockType.NA:
        return get_other_color(OtherColor.BACKGROUND)
    return get_block_color(_TYPE_COLORS[kind])


def get_block_color(block_color: BlockColor | int) -> Color:
    """The RGB value of a block colour."""
    return _BLOCK_COLORS[BlockColor(block_color)]


def get_other_color(other_color: OtherColor | int) -> Color:
    """The RGB value of a non-block colour."""
    return _OTHER_COLORS[OtherColor(other_color)]