# justjp2

Pure-Python building blocks for JPEG 2000 (JP2/J2K) coding. It has no
dependencies beyond the standard library.

## Modules

- `justjp2.types`: limits (`J2K_MAXRLVLS`, `J2K_MAXBANDS`,
  `J2K_MAX_CBLK_SIZE`, `MQC_NUMCTXS`) and the enums `ProgOrder`,
  `ColorSpace`, `CodecFormat`, `QuantStyle` and `Orient`.
- `justjp2.stream`: big-endian `read_u8`, `read_u16_be`, `read_u32_be`,
  `read_u64_be`, `write_u8`, `write_u16_be` and `write_u32_be` on byte
  buffers. It also has a `SliceReader` cursor (`tell`, `remaining`, `read_*`,
  `read_bytes`, `skip`, `seek`) and an append-only `ByteWriter`. An access past
  the end of a buffer raises `OutOfBoundsError`, which is a subclass of
  `IndexError`.
- `justjp2.quantize`: `StepSize` (packing to and from 16 bits with
  `to_u16`/`from_u16`, and `to_float`), the 5/3 and 9/7 DWT norm tables
  (`dwt_getnorm`, `dwt_getnorm_real`), the colour-transform norms
  (`mct_getnorm`, `mct_getnorm_real`), `quantize_band`, `dequantize_band`
  (mid-point reconstruction), `no_quantize` and `calc_stepsizes`. The band
  functions return new lists and leave their input unchanged.
- `justjp2.batch`: the reversible colour transform on whole sequences
  (`rct_forward_batch`, `rct_inverse_batch`) and the 5/3 lifting predict and
  update steps (`dwt53_predict_batch`, `dwt53_update_batch`).
- `justjp2.tagtree`: `TagTree` and `TagTreeNode`. `encode` returns the bits
  emitted for a leaf, and `decode` reads bits from an iterator.
- `justjp2.tile`: `TcdComponent`, `TcdParams`, `TileData`, `Subband`,
  `compute_subbands`, `extract_codeblock`, `place_codeblock`, `num_subbands`,
  `resolution_size`, `codeblock_count` and `band_dimensions`.
- `justjp2.codeblock`: `CodeBlock`, which holds sign-magnitude samples and a
  bordered grid of `CoeffFlags`, and the `CblkStyle` flags.
- `justjp2.contexts`: the context numbers `T1_CTXNO_ZC`, `T1_CTXNO_SC`,
  `T1_CTXNO_MAG`, `T1_CTXNO_AGG`, `T1_CTXNO_UNI` and `T1_NUMCTXS`, and the
  context functions `zc_context`, `sc_context_and_spb` and `mag_context`.

## Examples

Reading and writing big-endian values:

```python
from justjp2.stream import ByteWriter, SliceReader

writer = ByteWriter()
writer.write_u16_be(0xFF4F)
writer.write_u32_be(0xDEADBEEF)

reader = SliceReader(writer.getvalue())
assert reader.read_u16_be() == 0xFF4F
assert reader.read_u32_be() == 0xDEADBEEF
assert reader.remaining() == 0
```

Quantization step sizes:

```python
from justjp2.quantize import StepSize, calc_stepsizes

steps = calc_stepsizes(num_res=3, prec=8, is_reversible=False)
assert [StepSize.from_u16(s.to_u16()) for s in steps] == steps
```

The reversible colour transform:

```python
from justjp2.batch import rct_forward_batch, rct_inverse_batch

y, cb, cr = rct_forward_batch([100], [150], [200])
assert (y, cb, cr) == ([150], [50], [-50])
assert rct_inverse_batch(y, cb, cr) == ([100], [150], [200])
```

A tag tree round trip:

```python
from justjp2.tagtree import TagTree

values = {(0, 0): 3, (1, 0): 5, (0, 1): 2, (1, 1): 4}
encoder = TagTree(2, 2)
for (h, v), value in values.items():
    encoder.set_value(h, v, value)

bits = []
for h, v in values:
    bits += encoder.encode(h, v, 10)

decoder = TagTree(2, 2)
source = iter(bits)
assert {(h, v): decoder.decode(source, h, v, 10) for h, v in values} == values
```

Subband geometry:

```python
from justjp2.tile import resolution_size, codeblock_count

assert resolution_size(63, 33, 1) == (32, 17)
assert codeblock_count(65, 65, 64, 64) == 4
```

Tier-1 contexts:

```python
from justjp2.codeblock import CodeBlock
from justjp2.contexts import T1_CTXNO_ZC, zc_context
from justjp2.types import Orient

block = CodeBlock(4, 4)
block.update_flags(0, 1, sign=False)
assert zc_context(block, 1, 1, Orient.LL) == T1_CTXNO_ZC + 5
```

## What it does not do

The package does not encode or decode images or files. It has no MQ
arithmetic coder, no wavelet transform over whole images, no Tier-1 coding
passes and no packet or JP2 box handling. `CblkStyle` only names the style
flags, and `TcdParams` only holds parameters. Nothing in the package acts on
either. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```