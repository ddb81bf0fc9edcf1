"""Tests for image quantization and export.

Tests cover:
- Gamma quantization to 8 bits
- PPM header and pixel layout
- PPMWriter bookkeeping
- PNG export through Pillow
- Format selection from the file suffix
"""

import logging

import numpy as np
import pytest
from PIL import Image as PILImage


class TestImageToUint8:
    """Tests for image_to_uint8."""

    def test_endpoints_and_clamping(self):
        """Test 0 -> 0, 1 -> 255 and clamping outside [0, 1]."""
        from portaltrace.preview.export import image_to_uint8

        image = np.array([[[0.0, 1.0, 2.0], [-1.0, 0.5, 1.0]]], dtype=np.float32)
        result = image_to_uint8(image)

        assert result.dtype == np.uint8
        assert result.tolist() == [[[0, 255, 255], [0, 186, 255]]]

    def test_matches_color_display_bytes(self):
        """Test agreement with Color.to_display_bytes."""
        from portaltrace.core.color import Color
        from portaltrace.preview.export import image_to_uint8

        color = Color(0.1, 0.35, 0.8)
        image = np.array([[list(color)]], dtype=np.float64)
        assert tuple(image_to_uint8(image)[0, 0]) == color.to_display_bytes()


class TestPPM:
    """Tests for PPM output."""

    def test_save_ppm_layout(self, tmp_path):
        """Test the header and row-major RGB bytes."""
        from portaltrace.preview.export import save_ppm

        image = np.zeros((2, 3, 3), dtype=np.float32)
        image[0, 0] = [1.0, 0.0, 0.0]
        image[1, 2] = [0.0, 0.0, 1.0]
        output = tmp_path / "out.ppm"
        save_ppm(image, output)

        data = output.read_bytes()
        header = b"P6\n3 2\n255\n"
        assert data.startswith(header)
        pixels = data[len(header) :]
        assert len(pixels) == 2 * 3 * 3
        assert pixels[0:3] == bytes((255, 0, 0))
        assert pixels[-3:] == bytes((0, 0, 255))

    def test_writer_streams_pixels(self, tmp_path):
        """Test writing pixels one at a time."""
        from portaltrace.preview.export import PPMWriter

        output = tmp_path / "stream.ppm"
        with PPMWriter(output, 2, 1) as writer:
            writer.write_pixel(1, 2, 3)
            assert writer.pixels_remaining == 1
            writer.write_pixels([(4, 5, 6)])
            assert writer.pixels_remaining == 0

        assert output.read_bytes() == b"P6\n2 1\n255\n" + bytes((1, 2, 3, 4, 5, 6))

    def test_writer_rejects_extra_pixels(self, tmp_path):
        """Test that writing past the image size fails."""
        from portaltrace.preview.export import PPMWriter

        with PPMWriter(tmp_path / "full.ppm", 1, 1) as writer:
            writer.write_pixel(0, 0, 0)
            with pytest.raises(ValueError):
                writer.write_pixel(0, 0, 0)

    def test_incomplete_image_logs_warning(self, tmp_path, caplog):
        """Test the warning for a file closed early."""
        from portaltrace.preview.export import PPMWriter

        with caplog.at_level(logging.WARNING, logger="portaltrace.preview.export"):
            with PPMWriter(tmp_path / "short.ppm", 2, 2) as writer:
                writer.write_pixel(0, 0, 0)

        assert "3 pixels unwritten" in caplog.text

    def test_writer_rejects_empty_image(self, tmp_path):
        """Test that dimensions must be positive."""
        from portaltrace.preview.export import PPMWriter

        with pytest.raises(ValueError):
            PPMWriter(tmp_path / "empty.ppm", 0, 5)


class TestPNG:
    """Tests for PNG output."""

    def test_save_png_round_trip(self, tmp_path):
        """Test that the PNG holds the quantized pixels."""
        from portaltrace.preview.export import image_to_uint8, save_png

        rng = np.random.default_rng(1)
        image = rng.random((4, 5, 3)).astype(np.float32)
        output = tmp_path / "out.png"
        save_png(image, output)

        with PILImage.open(output) as loaded:
            assert loaded.size == (5, 4)
            assert loaded.mode == "RGB"
            assert np.array_equal(np.asarray(loaded), image_to_uint8(image))


class TestSaveImage:
    """Tests for save_image."""

    @pytest.mark.parametrize("suffix", [".ppm", ".png", ".PNG"])
    def test_known_suffixes(self, tmp_path, suffix):
        """Test that supported suffixes produce a file."""
        from portaltrace.preview.export import save_image

        output = tmp_path / f"image{suffix}"
        save_image(np.zeros((2, 2, 3), dtype=np.float32), output)
        assert output.exists()

    def test_unknown_suffix_raises(self, tmp_path):
        """Test that other formats are rejected."""
        from portaltrace.preview.export import save_image

        with pytest.raises(ValueError):
            save_image(np.zeros((2, 2, 3), dtype=np.float32), tmp_path / "image.jpg")
