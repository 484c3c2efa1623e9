"""Tests for png_encoder.py.

Round-trip checks decode the PNG with Pillow. Pixel checks on the line use a
tolerance because the two render paths anti-alias differently; background
pixels far from the line are compared exactly.
"""

import numpy as np
import pytest

from conftest import RecordingSurface
from signature_pad.core.path_events import Point
from signature_pad.rendering.backend import RenderBackend
from signature_pad.rendering.rasterizer import render_export
from signature_pad.rendering.software_surface import SoftwareSurface
from signature_pad.services.png_encoder import decode_png, encode_array, encode_png

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
BACKENDS = [RenderBackend.QT, RenderBackend.SOFTWARE]

# Max per-channel distance from pen color on the center of the line
INK_TOLERANCE = 60


def test_none_surface_encodes_to_none():
    assert encode_png(None) is None


@pytest.mark.usefixtures("qapp")
@pytest.mark.parametrize("backend", BACKENDS)
class TestRoundTrip:

    def test_output_is_png(self, backend, horizontal_line, white_line_style):
        data = encode_png(render_export(horizontal_line, white_line_style, backend))
        assert data.startswith(PNG_SIGNATURE)

    def test_single_segment_dimensions(self, backend, horizontal_line, white_line_style):
        pixels = decode_png(encode_png(render_export(horizontal_line, white_line_style, backend)))
        # width = 50 - 10 + 2*3, height = 0 + 2*3
        assert pixels.shape == (6, 46, 4)

    def test_line_pixels_are_pen_color(self, backend, horizontal_line, white_line_style):
        pixels = decode_png(encode_png(render_export(horizontal_line, white_line_style, backend)))
        for x in (10, 23, 35):
            r, g, b, a = pixels[3, x]
            assert max(r, g, b) <= INK_TOLERANCE
            assert a == 255

    def test_far_corners_are_background(self, backend, horizontal_line, white_line_style):
        pixels = decode_png(encode_png(render_export(horizontal_line, white_line_style, backend)))
        for y, x in ((0, 0), (0, 45), (5, 0), (5, 45)):
            assert tuple(pixels[y, x]) == (255, 255, 255, 255)

    def test_repeated_encoding_is_byte_identical(self, backend, multi_stroke_events, white_line_style):
        first = encode_png(render_export(multi_stroke_events, white_line_style, backend))
        second = encode_png(render_export(multi_stroke_events, white_line_style, backend))
        assert first == second

    def test_decoded_pixels_match_surface(self, backend, multi_stroke_events, white_line_style):
        surface = render_export(multi_stroke_events, white_line_style, backend)
        expected = surface.to_array()
        np.testing.assert_array_equal(decode_png(encode_png(surface)), expected)


def test_software_encoding_preserves_channel_order():
    surface = SoftwareSurface(2, 1)
    surface.pixels[0, 0] = (255, 0, 0, 255)
    surface.pixels[0, 1] = (0, 0, 255, 128)
    pixels = decode_png(encode_png(surface))
    assert tuple(pixels[0, 0]) == (255, 0, 0, 255)
    assert tuple(pixels[0, 1]) == (0, 0, 255, 128)


def test_encode_array_round_trip():
    pixels = np.zeros((3, 4, 4), dtype=np.uint8)
    pixels[1, 2] = (10, 20, 30, 40)
    np.testing.assert_array_equal(decode_png(encode_array(pixels)), pixels)


def test_unknown_raster_surface_goes_through_pixel_array():
    class ArraySurface(RecordingSurface):
        def to_array(self):
            pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
            pixels[..., 3] = 255
            return pixels

    data = encode_png(ArraySurface(5, 2))
    assert decode_png(data).shape == (2, 5, 4)


def test_export_of_single_point_encodes(qapp, white_line_style):
    data = encode_png(render_export([Point(5.0, 5.0)], white_line_style, RenderBackend.SOFTWARE))
    assert decode_png(data).shape == (6, 6, 4)
