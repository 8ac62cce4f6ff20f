import pytest

from astc_infill.types import (
    NUM_COLOR_ENDPOINT_MODES,
    ColorEndpointMode,
    endpoint_mode_class,
    num_color_values_for_endpoint_mode,
)


def test_modes_are_consecutive_from_zero():
    assert [int(m) for m in ColorEndpointMode] == list(range(NUM_COLOR_ENDPOINT_MODES))
    assert [ColorEndpointMode(i) for i in range(NUM_COLOR_ENDPOINT_MODES)] == list(
        ColorEndpointMode
    )
    assert endpoint_mode_class(0) == 0
    assert endpoint_mode_class(NUM_COLOR_ENDPOINT_MODES - 1) == 3
    assert num_color_values_for_endpoint_mode(NUM_COLOR_ENDPOINT_MODES - 1) == 8


def test_each_class_holds_four_modes():
    classes = [endpoint_mode_class(m) for m in ColorEndpointMode]
    assert sorted(set(classes)) == list(range(NUM_COLOR_ENDPOINT_MODES // 4))
    for cls in set(classes):
        assert classes.count(cls) == 4


def test_classes_are_non_decreasing():
    classes = [endpoint_mode_class(m) for m in ColorEndpointMode]
    assert classes == sorted(classes)


@pytest.mark.parametrize("mode", list(ColorEndpointMode))
def test_num_values_follow_class(mode):
    assert num_color_values_for_endpoint_mode(mode) == (endpoint_mode_class(mode) + 1) * 2


def test_int_accepted_like_enum():
    for mode in ColorEndpointMode:
        assert endpoint_mode_class(int(mode)) == endpoint_mode_class(mode)


def test_known_value_counts():
    assert num_color_values_for_endpoint_mode(ColorEndpointMode.LDR_LUMA_DIRECT) == 2
    assert num_color_values_for_endpoint_mode(ColorEndpointMode.LDR_RGB_DIRECT) == 6
    assert num_color_values_for_endpoint_mode(ColorEndpointMode.LDR_RGBA_DIRECT) == 8


def test_invalid_mode_rejected():
    with pytest.raises(ValueError):
        endpoint_mode_class(NUM_COLOR_ENDPOINT_MODES)
    with pytest.raises(ValueError):
        num_color_values_for_endpoint_mode(-1)