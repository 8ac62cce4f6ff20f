"""Color endpoint modes and related helpers (ASTC specification, Section C.2)."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ColorEndpointMode",
    "NUM_COLOR_ENDPOINT_MODES",
    "endpoint_mode_class",
    "num_color_values_for_endpoint_mode",
]


class ColorEndpointMode(IntEnum):
    """How the color values of an endpoint pair are interpreted.

    The order matches Section C.2.14 of the ASTC specification.
    """

    LDR_LUMA_DIRECT = 0
    LDR_LUMA_BASE_OFFSET = 1
    HDR_LUMA_LARGE_RANGE = 2
    HDR_LUMA_SMALL_RANGE = 3
    LDR_LUMA_ALPHA_DIRECT = 4
    LDR_LUMA_ALPHA_BASE_OFFSET = 5
    LDR_RGB_BASE_SCALE = 6
    HDR_RGB_BASE_SCALE = 7
    LDR_RGB_DIRECT = 8
    LDR_RGB_BASE_OFFSET = 9
    LDR_RGB_BASE_SCALE_TWO_A = 10
    HDR_RGB_DIRECT = 11
    LDR_RGBA_DIRECT = 12
    LDR_RGBA_BASE_OFFSET = 13
    HDR_RGB_DIRECT_LDR_ALPHA = 14
    HDR_RGB_DIRECT_HDR_ALPHA = 15


NUM_COLOR_ENDPOINT_MODES = len(ColorEndpointMode)


def endpoint_mode_class(mode: ColorEndpointMode | int) -> int:
    """Return the class of ``mode`` as defined in Section C.2.11."""
    return int(ColorEndpointMode(mode)) // 4


def num_color_values_for_endpoint_mode(mode: ColorEndpointMode | int) -> int:
    """Return the number of encoded color values for ``mode`` (Section C.2.17)."""
    return (endpoint_mode_class(mode) + 1) * 2