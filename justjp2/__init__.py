"""Building blocks of a JPEG 2000 codec: streams, quantization, tag trees, geometry and Tier-1 contexts."""

__version__ = "0.1.1"

__all__ = [
    "batch",
    "codeblock",
    "contexts",
    "quantize",
    "stream",
    "tagtree",
    "tile",
    "types",
]