"""Basic JPEG 2000 types and limits."""

from enum import IntEnum

J2K_MAXRLVLS = 33
"""Maximum number of resolution levels."""

J2K_MAXBANDS = 3 * J2K_MAXRLVLS - 2
"""Maximum number of subbands."""

J2K_MAX_CBLK_SIZE = 64
"""Maximum code-block width or height."""

MQC_NUMCTXS = 19
"""Number of MQ-coder contexts."""


class ProgOrder(IntEnum):
    """Packet progression order."""

    LRCP = 0
    RLCP = 1
    RPCL = 2
    PCRL = 3
    CPRL = 4


class ColorSpace(IntEnum):
    """Image colour space; UNKNOWN is the default."""

    UNKNOWN = 0
    UNSPECIFIED = 1
    SRGB = 2
    GRAY = 3
    YCC = 4
    CMYK = 5
    EYCC = 6


class CodecFormat(IntEnum):
    """Container format: a raw codestream or a JP2 file."""

    J2K = 0
    JP2 = 1


class QuantStyle(IntEnum):
    """Quantization style."""

    NONE = 0
    SCALAR_IMPLICIT = 1
    SCALAR_EXPLICIT = 2


class Orient(IntEnum):
    """Subband orientation."""

    LL = 0
    HL = 1
    LH = 2
    HH = 3