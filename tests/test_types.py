import pytest

from justjp2.types import CodecFormat, ColorSpace, Orient, ProgOrder, QuantStyle


@pytest.mark.parametrize(
    "order, value",
    [
        (ProgOrder.LRCP, 0),
        (ProgOrder.RLCP, 1),
        (ProgOrder.RPCL, 2),
        (ProgOrder.PCRL, 3),
        (ProgOrder.CPRL, 4),
    ],
)
def test_prog_order_roundtrip(order, value):
    assert int(order) == value
    assert ProgOrder(value) is order


@pytest.mark.parametrize("value", [5, 255])
def test_prog_order_invalid(value):
    with pytest.raises(ValueError):
        ProgOrder(value)


def test_color_space_default_value():
    assert ColorSpace(0) is ColorSpace.UNKNOWN


def test_codec_format_variants():
    assert CodecFormat.J2K != CodecFormat.JP2
    assert CodecFormat(0) is CodecFormat.J2K
    assert CodecFormat(1) is CodecFormat.JP2


def test_quant_style_variants():
    assert QuantStyle(0) is QuantStyle.NONE
    assert QuantStyle(1) is QuantStyle.SCALAR_IMPLICIT
    assert QuantStyle(2) is QuantStyle.SCALAR_EXPLICIT


def test_orient_lookup():
    assert [Orient(v) for v in range(4)] == [Orient.LL, Orient.HL, Orient.LH, Orient.HH]
    with pytest.raises(ValueError):
        Orient(4)