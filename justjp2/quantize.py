"""Scalar quantization, DWT/MCT norm tables and step-size calculation."""

from __future__ import annotations

import math
from dataclasses import dataclass

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


@dataclass(frozen=True)
class StepSize:
    """A step size as stored in QCD/QCC: 5-bit exponent, 11-bit mantissa."""

    exponent: int
    mantissa: int

    def to_u16(self) -> int:
        """Pack as exponent(5) | mantissa(11)."""
        return ((self.exponent << 11) | (self.mantissa & 0x7FF)) & 0xFFFF

    @classmethod
    def from_u16(cls, val: int) -> StepSize:
        """Unpack from a 16-bit value."""
        return cls(exponent=(val >> 11) & 0x1F, mantissa=val & 0x7FF)

    def to_float(self) -> float:
        """Raw value (1 + mantissa/2048) * 2**exponent, without guard bits."""
        return (1.0 + self.mantissa / 2048.0) * 2.0 ** self.exponent


# [orient][level], orient: 0=LL, 1=HL, 2=LH, 3=HH
_DWT_NORMS = (
    (1.000, 1.500, 2.750, 5.375, 10.68, 21.34, 42.67, 85.33, 170.7, 341.3),
    (1.038, 1.592, 2.919, 5.703, 11.33, 22.64, 45.25, 90.48, 180.9, 0.0),
    (1.038, 1.592, 2.919, 5.703, 11.33, 22.64, 45.25, 90.48, 180.9, 0.0),
    (0.7186, 0.9218, 1.586, 3.043, 6.019, 12.01, 24.00, 47.97, 95.93, 0.0),
)

_DWT_NORMS_REAL = (
    (1.000, 1.965, 4.177, 8.403, 16.90, 33.84, 67.69, 135.3, 270.6, 540.9),
    (2.022, 3.989, 8.355, 17.04, 34.27, 68.63, 137.3, 274.6, 549.0, 0.0),
    (2.022, 3.989, 8.355, 17.04, 34.27, 68.63, 137.3, 274.6, 549.0, 0.0),
    (2.080, 3.865, 8.307, 17.18, 34.71, 69.59, 139.3, 278.6, 557.2, 0.0),
)

_MCT_NORMS = (1.732, 0.8292, 0.8292)
_MCT_NORMS_REAL = (1.732, 1.805, 1.573)


def _lookup_norm(table, level: int, orient: int) -> float:
    if not 0 <= orient < len(table):
        raise IndexError(f"invalid subband orientation {orient}")
    level = min(level, 9 if orient == 0 else 8)
    return table[orient][level]


def dwt_getnorm(level: int, orient: int) -> float:
    """5/3 wavelet norm; level is clamped to the table."""
    return _lookup_norm(_DWT_NORMS, level, orient)


def dwt_getnorm_real(level: int, orient: int) -> float:
    """9/7 wavelet norm; level is clamped to the table."""
    return _lookup_norm(_DWT_NORMS_REAL, level, orient)


def _lookup_mct(table, compno: int) -> float:
    if not 0 <= compno < len(table):
        raise IndexError(f"invalid component number {compno}")
    return table[compno]


def mct_getnorm(compno: int) -> float:
    """Reversible colour transform norm for a component."""
    return _lookup_mct(_MCT_NORMS, compno)


def mct_getnorm_real(compno: int) -> float:
    """Irreversible colour transform norm for a component."""
    return _lookup_mct(_MCT_NORMS_REAL, compno)


def _effective_step(stepsize: StepSize, guard_bits: int) -> float:
    return (1.0 + stepsize.mantissa / 2048.0) * 2.0 ** (stepsize.exponent - guard_bits)


def _to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def quantize_band(coeffs, stepsize: StepSize, guard_bits: int) -> list[int]:
    """Forward quantization: sign(c) * floor(|c| / step)."""
    step = _effective_step(stepsize, guard_bits)
    if step <= 0.0:
        return list(coeffs)
    result = []
    for c in coeffs:
        if c == 0:
            result.append(0)
            continue
        sign = -1 if c < 0 else 1
        result.append(sign * _to_i32(math.floor(abs(c) / step)))
    return result


def dequantize_band(coeffs, stepsize: StepSize, guard_bits: int) -> list[int]:
    """Inverse quantization with mid-point reconstruction."""
    step = _effective_step(stepsize, guard_bits)
    if step <= 0.0:
        return list(coeffs)
    result = []
    for c in coeffs:
        if c == 0:
            result.append(0)
            continue
        sign = -1.0 if c < 0 else 1.0
        reconstructed = sign * (abs(c) + 0.5) * step
        result.append(_to_i32(_round_half_away(reconstructed)))
    return result


def no_quantize(coeffs, guard_bits: int) -> list[int]:
    """Pass-through mode: arithmetic shift right by guard_bits."""
    if guard_bits == 0:
        return list(coeffs)
    return [c >> guard_bits for c in coeffs]


def _floorlog2(val: int) -> int:
    if val <= 0:
        return 0
    return val.bit_length() - 1


def _encode_stepsize(stepsize: int, numbps: int) -> StepSize:
    log = _floorlog2(stepsize)
    p = log - 13
    n = 11 - log
    mant = (stepsize >> -n) & 0x7FF if n < 0 else (stepsize << n) & 0x7FF
    return StepSize(exponent=(numbps - p) & 0xFF, mantissa=mant)


def calc_stepsizes(num_res: int, prec: int, is_reversible: bool) -> list[StepSize]:
    """Step sizes for all subbands, ordered LL, HL, LH, HH from coarsest level."""
    if num_res < 1:
        raise ValueError("num_res must be at least 1")
    stepsizes = []
    for bandno in range(3 * num_res - 2):
        if bandno == 0:
            resno, orient = 0, 0
        else:
            resno = (bandno - 1) // 3 + 1
            orient = (bandno - 1) % 3 + 1
        level = num_res - 1 - resno

        if not is_reversible or orient == 0:
            gain = 0
        elif orient in (1, 2):
            gain = 1
        else:
            gain = 2

        if is_reversible:
            raw = 1.0
        else:
            raw = (1 << gain) / dwt_getnorm_real(level, orient)

        stepsizes.append(_encode_stepsize(math.floor(raw * 8192.0), prec + gain))
    return stepsizes