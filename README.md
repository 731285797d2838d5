# qrforge

A small QR code generator in pure Python with no third-party dependencies.
It encodes text, computes the Reed-Solomon error correction codewords, lays
out the finder, separator, alignment, timing, format and version patterns,
places the data in the standard zig-zag order, applies the chosen mask and
renders the symbol as block characters for a terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `qrforge` command. It prints the QR code
to standard output, surrounded by a four-module quiet zone and followed by
the symbol version that was chosen:

```
qrforge "HELLO WORLD" --encoding alphanumeric --ec-level Q --mask checkerboard
```

Arguments:

- `data` – the text to encode. Without it, a fixed sample text
  (`https://example.com` three times, separated by spaces) is used.
- `--encoding` – `numeric`, `alphanumeric`, `byte` or `kanji`; default `byte`.
- `--ec-level` – `L`, `M`, `Q` or `H`; default `H`.
- `--mask` – `checkerboard`, `horizontal`, `vertical`, `diagonal`,
  `large_checkerboard`, `fields`, `diamonds` or `meadow`; default `diagonal`.

If the text cannot be encoded in the chosen mode, or is too long for any
version at the chosen level, the command prints `error: ...` to standard
error and exits with status 1.

## Library use

The pipeline is driven by `qrforge.preprocessor.Preprocessor`, which encodes
the data, picks the smallest version whose capacity at the requested level
holds the number of characters, adds the terminator, bit and byte padding,
computes and interleaves the error correction codewords, and finally builds a
`QrCode`:

```python
from qrforge.ec import EcLevel
from qrforge.encoding import Encoding
from qrforge.mask import MaskPattern
from qrforge.preprocessor import Preprocessor

pre = Preprocessor("HELLO WORLD", Encoding.ALPHANUMERIC, EcLevel.Q, MaskPattern.DIAGONAL)
print(pre.version)          # the version that was chosen
code = pre.generate_qrcode()
print(code)
```

`str(code)` gives the rendered symbol: dark modules are drawn as spaces and
light modules (and the quiet zone) as full blocks, which suits a terminal
with a dark background. The last line shows `Version: <n>`.

The final codeword bit stream is logged at `DEBUG` level on the
`qrforge.preprocessor` logger as a string of `0` and `1`;
`qrforge.preprocessor.format_bits` produces that string from any bits.

### Encodings

- `Encoding.NUMERIC` – digits `0`–`9`, packed three per 10 bits.
- `Encoding.ALPHANUMERIC` – digits, upper-case `A`–`Z`, space and `$%*+-./:`,
  packed two per 11 bits.
- `Encoding.BYTE` – any character in ISO-8859-1, eight bits each.
- `Encoding.KANJI` – has a mode indicator and capacity table, but encoding
  data in it raises `EncodingError`.

A character that the chosen encoding cannot represent raises
`qrforge.encoding.EncodingError` (a subclass of `ValueError`). Data too long
for version 40 at the chosen level raises `ValueError`.

### Error correction levels and masks

`EcLevel` offers `L`, `M`, `Q` and `H`. `MaskPattern` offers the eight
standard masks (`CHECKERBOARD`, `HORIZONTAL`, `VERTICAL`, `DIAGONAL`,
`LARGE_CHECKERBOARD`, `FIELDS`, `DIAMONDS`, `MEADOW`);
`MaskPattern.get_mask()` returns the predicate on `(x, y)` that decides which
data modules are inverted.

### Lower-level pieces

- `qrforge.ec` – `codewords`, `groups`, `create_ec_for_block` and
  `interleave` for splitting data into blocks and computing Reed-Solomon
  error correction over GF(256).
- `qrforge.tables` – capacity and block tables, plus `gf_exp`, `gf_log`,
  `generator_polynomial`, `data_block_layout` and `ec_bytes_per_block`.
- `qrforge.bit` – the `Bit` module value (`value` for dark or light,
  `functional` for pattern or data) and the helpers `bits_from_int`,
  `bits_to_bytes` and `bytes_to_bits`.
- `qrforge.encoding` – `Encoding`, `to_bits_str`, `to_bits_array` and
  `alphanumeric_value`.
- `qrforge.qrcode` – `QrCode`, the module grid with `get`, `put`, the pattern
  drawing methods, `fill` and `apply_mask`, along with `size_from_version`
  and `combination`.

## What it does not do

- It only renders to text; there is no PNG, SVG or other image output.
- The mask is chosen by the caller; masks are not scored to pick the best.
- Kanji data cannot be encoded, and a symbol holds a single encoding mode —
  mixed-mode segments and ECI are not supported.
- Versions 1 to 40 are supported; Micro QR is not.