import pytest

from justjp2.quantize import (
    StepSize,
    calc_stepsizes,
    dequantize_band,
    dwt_getnorm,
    dwt_getnorm_real,
    mct_getnorm,
    mct_getnorm_real,
    no_quantize,
    quantize_band,
)


def test_stepsize_roundtrip():
    ss = StepSize(exponent=13, mantissa=1024)
    assert StepSize.from_u16(ss.to_u16()) == ss


def test_stepsize_packing_layout():
    assert StepSize(exponent=1, mantissa=0x7FF).to_u16() == 0x0FFF
    assert StepSize.from_u16(0xF801) == StepSize(exponent=31, mantissa=1)


def test_stepsize_to_float_basic():
    assert StepSize(exponent=1, mantissa=0).to_float() == pytest.approx(2.0, abs=1e-10)
    assert StepSize(exponent=2, mantissa=1024).to_float() == pytest.approx(6.0)


def test_quantize_zero():
    assert quantize_band([0, 0, 0], StepSize(exponent=10, mantissa=0), 2) == [0, 0, 0]


def test_quantize_values():
    ss = StepSize(exponent=2, mantissa=0)
    assert quantize_band([9, -9, 3, 0, 4], ss, 0) == [2, -2, 0, 0, 1]


def test_quantize_guard_bits_shrink_step():
    ss = StepSize(exponent=3, mantissa=0)
    assert quantize_band([9, -9], ss, 1) == [2, -2]


def test_dequantize_midpoint():
    ss = StepSize(exponent=2, mantissa=0)
    assert dequantize_band([2, -2, 0], ss, 0) == [10, -10, 0]


def test_dequantize_rounds_half_away_from_zero():
    ss = StepSize(exponent=0, mantissa=0)
    assert dequantize_band([2, -2, 1], ss, 0) == [3, -3, 2]


def test_no_quantize_shift():
    assert no_quantize([8, -8, 7], 2) == [2, -2, 1]
    assert no_quantize([5, -5], 0) == [5, -5]


def test_dwt_norms_clamped():
    assert dwt_getnorm(0, 0) == 1.000
    assert dwt_getnorm(20, 0) == 341.3
    assert dwt_getnorm(20, 1) == 180.9
    assert dwt_getnorm_real(0, 3) == 2.080
    assert dwt_getnorm_real(50, 2) == 549.0


def test_dwt_norm_bad_orient():
    with pytest.raises(IndexError):
        dwt_getnorm(0, 4)


def test_mct_norms():
    assert mct_getnorm(1) == 0.8292
    assert mct_getnorm_real(2) == 1.573
    with pytest.raises(IndexError):
        mct_getnorm(3)
    with pytest.raises(IndexError):
        mct_getnorm_real(-1)


def test_calc_stepsizes_reversible():
    steps = calc_stepsizes(3, 8, True)
    assert len(steps) == 7
    assert [s.mantissa for s in steps] == [0] * 7
    assert [s.exponent for s in steps] == [8, 9, 9, 10, 9, 9, 10]


def test_calc_stepsizes_irreversible_approximates_norm():
    prec = 8
    num_res = 4
    steps = calc_stepsizes(num_res, prec, False)
    assert len(steps) == 3 * num_res - 2
    for bandno, ss in enumerate(steps):
        resno = 0 if bandno == 0 else (bandno - 1) // 3 + 1
        orient = 0 if bandno == 0 else (bandno - 1) % 3 + 1
        level = num_res - 1 - resno
        expected = 1.0 / dwt_getnorm_real(level, orient)
        decoded = (1.0 + ss.mantissa / 2048.0) * 2.0 ** (prec - ss.exponent)
        assert decoded == pytest.approx(expected, rel=1e-3)


def test_calc_stepsizes_single_resolution():
    assert calc_stepsizes(1, 8, False) == [StepSize(exponent=8, mantissa=0)]


def test_calc_stepsizes_rejects_zero_resolutions():
    with pytest.raises(ValueError):
        calc_stepsizes(0, 8, True)