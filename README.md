# astc_infill

Small, dependency-free helpers for decoding ASTC texture blocks.

## Contents

### `astc_infill.types`

- `ColorEndpointMode`: an `IntEnum` of the sixteen color endpoint modes,
  numbered 0 to 15 in the order the ASTC specification gives them
  (Section C.2.14). Examples are `LDR_LUMA_DIRECT`, `LDR_RGB_BASE_SCALE`,
  `LDR_RGBA_DIRECT` and `HDR_RGB_DIRECT_HDR_ALPHA`.
- `NUM_COLOR_ENDPOINT_MODES`: the number of modes, 16.
- `endpoint_mode_class(mode)`: the class of a mode, which is its number
  divided by four (Section C.2.11). It accepts a `ColorEndpointMode` or a
  plain integer. An integer that is not a valid mode raises `ValueError`.
- `num_color_values_for_endpoint_mode(mode)`: how many encoded color values
  a mode uses, `(class + 1) * 2` (Section C.2.17).

### `astc_infill.weight_infill`

- `infill_weights(weights, block_width, block_height, dim_x, dim_y)`: expands
  a `dim_x × dim_y` grid of unquantized weights to one weight per texel of a
  `block_width × block_height` block. It follows the bilinear infill
  procedure of Section C.2.18.
  - `weights` is the grid in row-major order.
  - The result is a flat list in row-major order, one entry per texel.
  - Each result lies in `[0, 64]` when the input weights do.
  - A block dimension below 2 raises `ValueError`.
  - A grid coordinate that reaches 256 raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from astc_infill.types import ColorEndpointMode, num_color_values_for_endpoint_mode
from astc_infill.weight_infill import infill_weights

num_color_values_for_endpoint_mode(ColorEndpointMode.LDR_RGBA_DIRECT)  # 8

weights = infill_weights([1, 3, 5, 3, 5, 7, 5, 7, 9], 5, 5, 3, 3)
# [1, 2, 3, 4, 5,
#  2, 3, 4, 5, 6,
#  3, 4, 5, 6, 7,
#  4, 5, 6, 7, 8,
#  5, 6, 7, 8, 9]
```

## What this package does not do

This package is not a complete ASTC decoder. It does not:

- read `.astc` files;
- parse or unpack physical blocks;
- decode integer sequences or quantized values;
- decode color endpoints;
- count the bits a weight grid takes;
- produce RGBA images.

It provides only the endpoint-mode table and the weight infill step.
Callers pass weights that are already unquantized.

## Running the tests

```
pip install .[test]
pytest
```