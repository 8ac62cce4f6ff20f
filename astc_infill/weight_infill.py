"""Bilinear infill of an ASTC weight grid onto a block footprint (Section C.2.18)."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["infill_weights"]


def _scale_factor(block_dim: int) -> int:
    if block_dim < 2:
        raise ValueError(f"block dimension must be at least 2, got {block_dim}")
    return (1024 + (block_dim >> 1)) // (block_dim - 1)


def infill_weights(
    weights: Sequence[int],
    block_width: int,
    block_height: int,
    dim_x: int,
    dim_y: int,
) -> list[int]:
    """Spread a ``dim_x`` by ``dim_y`` grid of unquantized weights over a block.

    Returns one weight per texel in row-major order, each in the range [0, 64]
    when the inputs are.
    """
    ds = _scale_factor(block_width)
    dt = _scale_factor(block_height)
    num_grid_points = dim_x * dim_y

    result = []
    for t in range(block_height):
        gt = (dt * t * (dim_y - 1) + 32) >> 6
        if gt >= 1 << 8:
            raise ValueError("weight grid coordinate out of range")
        jt, ft = gt >> 4, gt & 0xF
        for s in range(block_width):
            gs = (ds * s * (dim_x - 1) + 32) >> 6
            if gs >= 1 << 8:
                raise ValueError("weight grid coordinate out of range")
            js, fs = gs >> 4, gs & 0xF

            base = js + dim_x * jt
            points = (base, base + 1, base + dim_x, base + dim_x + 1)

            w11 = (fs * ft + 8) >> 4
            factors = (16 - fs - ft + w11, fs - w11, ft - w11, w11)

            weight = sum(
                weights[point] * factor
                for point, factor in zip(points, factors)
                if point < num_grid_points
            )
            result.append((weight + 8) >> 4)
    return result