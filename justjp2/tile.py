"""Tile geometry: components, coding parameters, subbands and code-blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence, Optional, Sequence

from justjp2.types import Orient


@dataclass
class TcdComponent:
    """Geometry and sample format of one image component."""

    width: int
    height: int
    precision: int
    signed: bool
    dx: int = 1
    dy: int = 1


@dataclass
class TcdParams:
    """Tile coding parameters."""

    num_res: int = 6
    cblk_w: int = 64
    cblk_h: int = 64
    reversible: bool = True
    num_layers: int = 1
    use_mct: bool = False
    reduce: int = 0
    """Resolution levels to skip when decoding (0 = full resolution)."""
    max_bytes: Optional[int] = None
    """Upper limit on the encoded tile size in bytes, or None for no limit."""


@dataclass
class TileData:
    """Samples of every component of a tile, each row-major."""

    components: list[list[int]] = field(default_factory=list)
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Subband:
    """Placement of one subband inside an in-place DWT component buffer."""

    orient: Orient
    width: int
    height: int
    x_off: int
    y_off: int
    level: int
    """Decomposition level; 0 for an undecomposed component."""


def resolution_size(comp_w: int, comp_h: int, level: int) -> tuple[int, int]:
    """Size of the LL region after ``level`` halvings (rounding up)."""
    w, h = comp_w, comp_h
    for _ in range(level):
        w = (w + 1) // 2
        h = (h + 1) // 2
    return w, h


def compute_subbands(comp_w: int, comp_h: int, num_decomp: int) -> list[Subband]:
    """Subband layout after ``num_decomp`` levels of in-place DWT.

    The coarsest LL comes first, followed by HL, LH, HH for each level from
    the coarsest to the finest.
    """
    if num_decomp == 0:
        return [Subband(Orient.LL, comp_w, comp_h, 0, 0, 0)]

    sizes = [resolution_size(comp_w, comp_h, lev) for lev in range(num_decomp + 1)]
    ll_w, ll_h = sizes[num_decomp]
    bands = [Subband(Orient.LL, ll_w, ll_h, 0, 0, num_decomp)]

    for lev in reversed(range(num_decomp)):
        w, h = sizes[lev]
        low_w = (w + 1) // 2
        low_h = (h + 1) // 2
        high_w = w - low_w
        high_h = h - low_h
        bands.append(Subband(Orient.HL, high_w, low_h, low_w, 0, lev + 1))
        bands.append(Subband(Orient.LH, low_w, high_h, 0, low_h, lev + 1))
        bands.append(Subband(Orient.HH, high_w, high_h, low_w, low_h, lev + 1))
    return bands


def _check_region(
    buf_len: int,
    comp_stride: int,
    subband: Subband,
    cb_x: int,
    cb_y: int,
    cb_w: int,
    cb_h: int,
) -> None:
    if comp_stride <= 0:
        raise ValueError("component stride must be positive")
    if min(cb_x, cb_y, cb_w, cb_h) < 0:
        raise ValueError("code-block position and size must not be negative")
    col_end = subband.x_off + cb_x + cb_w
    row_end = subband.y_off + cb_y + cb_h
    if cb_w and cb_h and (col_end > comp_stride or row_end * comp_stride > buf_len):
        raise IndexError("code-block lies outside the component buffer")


def extract_codeblock(
    comp_buf: Sequence[int],
    comp_stride: int,
    subband: Subband,
    cb_x: int,
    cb_y: int,
    cb_w: int,
    cb_h: int,
) -> list[int]:
    """Copy a code-block out of a subband as a row-major list."""
    _check_region(len(comp_buf), comp_stride, subband, cb_x, cb_y, cb_w, cb_h)
    out: list[int] = []
    col = subband.x_off + cb_x
    for row in range(subband.y_off + cb_y, subband.y_off + cb_y + cb_h):
        start = row * comp_stride + col
        out.extend(comp_buf[start:start + cb_w])
    return out


def place_codeblock(
    comp_buf: MutableSequence[int],
    comp_stride: int,
    subband: Subband,
    cb_x: int,
    cb_y: int,
    cb_w: int,
    cb_h: int,
    cblk_data: Sequence[int],
) -> None:
    """Write a row-major code-block back into the component buffer in place."""
    _check_region(len(comp_buf), comp_stride, subband, cb_x, cb_y, cb_w, cb_h)
    if len(cblk_data) < cb_w * cb_h:
        raise ValueError(
            f"code-block data holds {len(cblk_data)} samples, need {cb_w * cb_h}"
        )
    col = subband.x_off + cb_x
    for r in range(cb_h):
        start = (subband.y_off + cb_y + r) * comp_stride + col
        comp_buf[start:start + cb_w] = cblk_data[r * cb_w:(r + 1) * cb_w]


def num_subbands(num_decomp: int) -> int:
    """Number of subbands for ``num_decomp`` decomposition levels."""
    return 1 if num_decomp == 0 else 1 + 3 * num_decomp


def codeblock_count(sb_w: int, sb_h: int, cblk_w: int, cblk_h: int) -> int:
    """Number of code-blocks needed to cover a subband."""
    if sb_w == 0 or sb_h == 0:
        return 0
    nx = (sb_w + cblk_w - 1) // cblk_w
    ny = (sb_h + cblk_h - 1) // cblk_h
    return nx * ny


def band_dimensions(
    comp_w: int, comp_h: int, num_decomp: int, level: int, orient: Orient
) -> tuple[int, int]:
    """Size of a subband at a 1-based level (1 = finest detail).

    Level 0 means the LL band at the coarsest level.
    """
    if level == 0:
        return resolution_size(comp_w, comp_h, num_decomp)
    rw, rh = resolution_size(comp_w, comp_h, level - 1)
    low_w = (rw + 1) // 2
    low_h = (rh + 1) // 2
    high_w = rw - low_w
    high_h = rh - low_h
    return {
        Orient.LL: (low_w, low_h),
        Orient.HL: (high_w, low_h),
        Orient.LH: (low_w, high_h),
        Orient.HH: (high_w, high_h),
    }[Orient(orient)]