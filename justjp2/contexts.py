"""Context formation for the tier-1 coder (zero, sign and refinement coding)."""

from __future__ import annotations

from justjp2.codeblock import CodeBlock
from justjp2.types import Orient

T1_CTXNO_ZC = 0
"""First of the 9 zero-coding contexts."""
T1_CTXNO_SC = 9
"""First of the 5 sign-coding contexts."""
T1_CTXNO_MAG = 14
"""First of the 3 magnitude-refinement contexts."""
T1_CTXNO_AGG = 17
"""Run-length aggregation context."""
T1_CTXNO_UNI = 18
"""Uniform context."""
T1_NUMCTXS = 19
"""Total number of tier-1 contexts."""


def _check_inside(block: CodeBlock, x: int, y: int) -> None:
    if not (0 <= x < block.width and 0 <= y < block.height):
        raise IndexError(f"coefficient ({x}, {y}) outside the code-block")


def _sig(block: CodeBlock, x: int, y: int) -> int:
    return int(block.flag(x, y).significant)


def _directional_ctx(sum_h: int, sum_v: int, sum_d: int) -> int:
    if sum_h == 2:
        return 8
    if sum_h == 1:
        if sum_v >= 1:
            return 7
        if sum_d >= 1:
            return 6
        return 5
    if sum_v == 2:
        return 4
    if sum_v == 1:
        return 3
    if sum_d >= 2:
        return 2
    if sum_d == 1:
        return 1
    return 0


def _diagonal_ctx(sum_hv: int, sum_d: int) -> int:
    if sum_hv >= 3:
        return 8
    if sum_hv == 2:
        return 7 if sum_d >= 1 else 6
    if sum_hv == 1:
        if sum_d >= 2:
            return 5
        if sum_d == 1:
            return 4
        return 3
    if sum_d >= 2:
        return 2
    if sum_d == 1:
        return 1
    return 0


def zc_context(block: CodeBlock, x: int, y: int, orient: Orient) -> int:
    """Zero-coding context of (x, y) for a subband orientation."""
    _check_inside(block, x, y)
    orient = Orient(orient)
    sig_n = _sig(block, x, y - 1)
    sig_s = _sig(block, x, y + 1)
    sig_w = _sig(block, x - 1, y)
    sig_e = _sig(block, x + 1, y)
    sum_d = (
        _sig(block, x - 1, y - 1)
        + _sig(block, x + 1, y - 1)
        + _sig(block, x - 1, y + 1)
        + _sig(block, x + 1, y + 1)
    )

    if orient in (Orient.LL, Orient.LH):
        ctx = _directional_ctx(sig_w + sig_e, sig_n + sig_s, sum_d)
    elif orient is Orient.HL:
        # Vertical neighbours take the horizontal role.
        ctx = _directional_ctx(sig_n + sig_s, sig_w + sig_e, sum_d)
    else:
        ctx = _diagonal_ctx(sig_n + sig_s + sig_e + sig_w, sum_d)
    return T1_CTXNO_ZC + ctx


def _contribution(block: CodeBlock, x: int, y: int) -> int:
    flags = block.flag(x, y)
    if not flags.significant:
        return 0
    return -1 if flags.sign else 1


def sc_context_and_spb(block: CodeBlock, x: int, y: int) -> tuple[int, int]:
    """Sign-coding context and sign prediction bit of (x, y).

    The bit actually coded is the true sign XOR the prediction bit
    (1 predicts negative).
    """
    _check_inside(block, x, y)
    h = _contribution(block, x - 1, y) + _contribution(block, x + 1, y)
    v = _contribution(block, x, y - 1) + _contribution(block, x, y + 1)

    if h > 0 and v > 0:
        offset, spb = 4, 0
    elif (h > 0 and v == 0) or (h == 0 and v > 0):
        offset, spb = 3, 0
    elif h == 0 and v == 0:
        offset, spb = 0, 0
    elif h < 0 and v < 0:
        offset, spb = 4, 1
    elif (h < 0 and v == 0) or (h == 0 and v < 0):
        offset, spb = 3, 1
    elif h > 0 and v < 0:
        offset, spb = 2, 0
    elif h < 0 and v > 0:
        offset, spb = 2, 1
    else:
        offset, spb = (1, 0) if h + v >= 0 else (1, 1)
    return T1_CTXNO_SC + offset, spb


def mag_context(block: CodeBlock, x: int, y: int) -> int:
    """Magnitude-refinement context of (x, y)."""
    _check_inside(block, x, y)
    if not block.has_significant_neighbor(x, y):
        return T1_CTXNO_MAG
    if not block.flag(x, y).refined:
        return T1_CTXNO_MAG + 1
    return T1_CTXNO_MAG + 2