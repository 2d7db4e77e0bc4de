"""Code-block state for the tier-1 coder: samples and per-coefficient flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterator, Sequence

_SIGN_BIT = 1 << 31
_MAG_MASK = 0x7FFF_FFFF


class CblkStyle(IntFlag):
    """Code-block coding style (cblksty) flags."""

    BYPASS = 0x01
    """Raw coding for significance and refinement passes after the 4th bit-plane."""
    RESET = 0x02
    """Reset the MQ-coder contexts after each pass."""
    TERMALL = 0x04
    """Terminate every coding pass."""
    VSC = 0x08
    """Vertically stripe-causal context formation."""
    PTERM = 0x10
    """Predictable termination."""
    SEGSYM = 0x20
    """Segmentation symbols."""


@dataclass
class CoeffFlags:
    """Coding state of one coefficient."""

    significant: bool = False
    sign: bool = False
    """True when the coefficient is negative."""
    refined: bool = False
    visited: bool = False
    """Visited in the significance propagation pass of the current bit-plane."""


_NEIGHBOURS = ((-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1))


class CodeBlock:
    """Samples of one code-block in sign-magnitude form plus a flag grid.

    ``data`` holds one integer per sample, row-major: bit 31 is the sign and
    bits 0..30 the magnitude.  ``flags`` is a grid one coefficient wider on
    every side, so neighbours of edge coefficients can be read without
    special cases; the border always stays insignificant unless set.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("code-block dimensions must not be negative")
        self.width = width
        self.height = height
        self.data: list[int] = [0] * (width * height)
        self.flags_stride = width + 2
        self.flags: list[CoeffFlags] = [
            CoeffFlags() for _ in range(self.flags_stride * (height + 2))
        ]

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_ints())

    def set_data(self, values: Sequence[int]) -> None:
        """Load two's-complement samples, converting them to sign-magnitude."""
        count = self.width * self.height
        if len(values) < count:
            raise ValueError(
                f"need at least {count} samples for a {self.width}x{self.height} "
                f"code-block, got {len(values)}"
            )
        self.data = [
            _SIGN_BIT | (-v & _MAG_MASK) if v < 0 else v & _MAG_MASK
            for v in values[:count]
        ]

    def to_ints(self) -> list[int]:
        """The samples as signed integers."""
        return [-(v & _MAG_MASK) if v & _SIGN_BIT else v & _MAG_MASK for v in self.data]

    def numbps(self) -> int:
        """Number of bit-planes needed for the largest magnitude."""
        return max((v & _MAG_MASK for v in self.data), default=0).bit_length()

    def _flag_index(self, x: int, y: int) -> int:
        if not (-1 <= x <= self.width and -1 <= y <= self.height):
            raise IndexError(f"coefficient ({x}, {y}) outside the flag grid")
        return (y + 1) * self.flags_stride + (x + 1)

    def flag(self, x: int, y: int) -> CoeffFlags:
        """Flags of the coefficient at (x, y); -1 and width/height give the border."""
        return self.flags[self._flag_index(x, y)]

    def has_significant_neighbor(self, x: int, y: int) -> bool:
        """Whether any of the eight neighbours of (x, y) is significant."""
        self._check_inside(x, y)
        return any(self.flag(x + dx, y + dy).significant for dx, dy in _NEIGHBOURS)

    def update_flags(self, x: int, y: int, sign: bool) -> None:
        """Mark (x, y) significant with the given sign (True = negative)."""
        self._check_inside(x, y)
        flags = self.flag(x, y)
        flags.significant = True
        flags.sign = sign

    def reset_flags(self) -> None:
        """Clear every flag, border included."""
        for flags in self.flags:
            flags.significant = False
            flags.sign = False
            flags.refined = False
            flags.visited = False

    def clear_visited(self) -> None:
        """Clear only the visited flags."""
        for flags in self.flags:
            flags.visited = False

    def _check_inside(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"coefficient ({x}, {y}) outside the code-block")