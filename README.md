# chromakit

Small, dependency-free utilities used when computing and encoding audio
fingerprints.

## Modules

### `chromakit.base64url`

Unpadded URL-safe base64 using the `-` and `_` alphabet.

- `encode(data)` turns bytes into text and never emits `=`.
- `decode(data)` accepts `str` or bytes and never fails: characters outside
  the alphabet count as zero bits, and a single trailing character that
  cannot form a byte is ignored.
- `get_encoded_size(size)` and `get_decoded_size(size)` give the lengths
  these functions produce.

### `chromakit.bitpack`

Packs small unsigned integers into a little-endian bit stream, least
significant bit first. Only the low 3 or 5 bits of each value are kept.

- `pack_int3_array(values)`, `unpack_int3_array(data)`
- `pack_int5_array(values)`, `unpack_int5_array(data)`
- `packed_int3_size(size)`, `unpacked_int3_size(size)`,
  `packed_int5_size(size)`, `unpacked_int5_size(size)`

Unpacking returns every whole value the bytes hold, so padding bits at the
end may show up as extra zero values.

### `chromakit.filters`

- `box_filter(values, width)`: moving average over `width` samples, with the
  window reflected at both ends. A width of zero gives a list of zeros.
- `gaussian_filter(values, sigma, n)`: Gaussian blur approximated by `n`
  passes of box filters.
- `gradient(values)`: central differences, one-sided at the ends; a single
  value gives `[0]` and an empty input gives `[]`.
- `ReflectIterator(size)`: an index that walks over `range(size)` and bounces
  at both ends, with `move_forward()`, `move_back()` and
  `safe_forward_distance()`.

### `chromakit.rolling_integral_image`

`RollingIntegralImage(max_rows)` is a summed-area table that keeps only the
most recent rows.

- `add_row(row)` appends a row; the first row fixes the column count and a
  row of another length raises `ValueError`.
- `area(r1, c1, r2, c2)` sums rows `r1:r2` and columns `c1:c2`. Indices out
  of range, or rows that have already rolled out of the window, raise
  `IndexError`; corners in the wrong order raise `ValueError`.
- `num_rows` and `num_columns` are read-only properties; `reset()` clears the
  image.
- `RollingIntegralImage.from_values(num_columns, values)` builds an image
  holding every row of a flat row-major sequence.

## Example

```python
from chromakit import base64url, bitpack
from chromakit.rolling_integral_image import RollingIntegralImage

packed = bitpack.pack_int3_array([1, 2, 3, 4])
assert bitpack.unpack_int3_array(packed)[:4] == [1, 2, 3, 4]

assert base64url.encode(b"xx") == "eHg"
assert base64url.decode("eHg") == b"xx"

image = RollingIntegralImage(4)
image.add_row([1, 2, 3])
image.add_row([4, 5, 6])
assert image.area(0, 0, 2, 3) == 21
```

## What it does not do

These are building blocks only. The package does not decode audio files,
does not compute fingerprints from audio, does not compress or decompress
whole fingerprints, and has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```