"""Tests for per-pixel colour transforms and quantization."""

import numpy as np
import pytest
from models.image_buffer import ImageBuffer, EmptyImageError
from engines.convolution import blur5x5, gauss3x3
from engines.gradients import sobel_x3x3, sobel_y3x3, gradient_magnitude, magnitude, emboss
from engines.pixel_ops import greyscale, luma_greyscale, sepia_tone, adjust_brightness, negative
from engines.quantize import blur_quantize, quantize_levels
from utils.test_images import generate_noise, generate_uniform, generate_photo


def _pixel(r, g, b):
    return ImageBuffer(np.array([[[r, g, b]]], dtype=np.uint8))


def test_greyscale_uses_inverted_red():
    out = greyscale(_pixel(10, 50, 200))
    assert out.data.tolist() == [[[245, 245, 245]]]


def test_greyscale_channels_equal():
    out = greyscale(ImageBuffer(generate_photo(32))).data
    assert np.array_equal(out[:, :, 0], out[:, :, 1])
    assert np.array_equal(out[:, :, 1], out[:, :, 2])


def test_greyscale_needs_colour():
    with pytest.raises(ValueError):
        greyscale(ImageBuffer(np.zeros((4, 4), dtype=np.uint8)))


def test_luma_greyscale_single_channel():
    out = luma_greyscale(ImageBuffer(generate_uniform(8, value=100)))
    assert out.channels == 1
    assert np.all(out.data == 100)


def test_sepia_low_intensity():
    """(10, 10, 10) -> R 13.51, G 12.03, B 9.37, rounded."""
    out = sepia_tone(_pixel(10, 10, 10))
    assert out.data.tolist() == [[[14, 12, 9]]]
    assert np.all(np.abs(out.data.astype(int) - 10) <= 4)


def test_sepia_clamps_to_255():
    out = sepia_tone(_pixel(255, 255, 255))
    assert out.data.tolist() == [[[255, 255, 239]]]


def test_brightness_clamps():
    """200 * 2.0 = 400 saturates to 255."""
    src = ImageBuffer(np.full((2, 2, 3), 200, dtype=np.uint8))
    assert np.all(adjust_brightness(src, 2.0).data == 255)
    assert np.all(adjust_brightness(ImageBuffer(generate_uniform(2, 100)), 1.5).data == 150)
    assert np.all(adjust_brightness(src, 0.0).data == 0)


def test_negative_is_involution():
    src = ImageBuffer(generate_noise(16, seed=9))
    once = negative(src)
    assert once.data[0, 0, 0] == 255 - src.data[0, 0, 0]
    np.testing.assert_array_equal(negative(once).data, src.data)


def test_quantize_bucket_floor():
    """255/10 = 25.5 wide buckets: 127 -> bucket 4 -> 102."""
    values = np.array([0, 25, 26, 127, 254, 255], dtype=np.uint8)
    assert quantize_levels(values, 10).tolist() == [0, 0, 25, 102, 229, 255]


def test_blur_quantize_uniform():
    out = blur_quantize(ImageBuffer(generate_uniform(12, value=127)), levels=10)
    assert out.dtype == np.uint8
    assert np.all(out.data == 102)


def test_blur_quantize_rejects_bad_levels():
    with pytest.raises(ValueError):
        blur_quantize(ImageBuffer(generate_uniform(8)), levels=0)


EMPTY_CALLS = [
    greyscale,
    luma_greyscale,
    sepia_tone,
    negative,
    blur5x5,
    gauss3x3,
    sobel_x3x3,
    sobel_y3x3,
    gradient_magnitude,
    blur_quantize,
    lambda src: adjust_brightness(src, 1.5),
    lambda src: magnitude(src, src),
    lambda src: emboss(src, src),
]


@pytest.mark.parametrize("call", EMPTY_CALLS)
def test_empty_input_fails(call):
    """Every filter rejects a zero-pixel buffer."""
    empty = ImageBuffer(np.zeros((0, 0, 3), dtype=np.uint8))
    with pytest.raises(EmptyImageError):
        call(empty)
