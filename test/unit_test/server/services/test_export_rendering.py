"""Unit tests for the export helpers and preview rendering."""

import io

import pytest
from PIL import Image

from expressfix.core.models.domain import ExportFormat, ExportQuality
from expressfix.server.services.exports import (
    CANVAS_COLOR,
    estimate_export_size,
    export_file_name,
    export_object_path,
    render_canvas,
    render_preview,
    render_svg,
)


class TestSizeEstimate:
    @pytest.mark.parametrize(
        "fmt,quality,expected",
        [
            ("PNG", "high", "2.5 MB"),
            ("PNG", "low", "600 KB"),
            ("JPG", "high", "1.8 MB"),
            ("PDF", "medium", "1.5 MB"),
            ("SVG", "low", "50 KB"),
        ],
    )
    def test_table(self, fmt, quality, expected):
        assert estimate_export_size(fmt, quality) == expected

    @pytest.mark.parametrize("fmt,quality", [("GIF", "high"), ("PNG", "ultra"), ("png", "high")])
    def test_unknown_combination_falls_back(self, fmt, quality):
        assert estimate_export_size(fmt, quality) == "1 MB"


def test_names_and_paths():
    name = export_file_name("JPG", 1700000000000)
    assert name == "enhanced-design-1700000000000.jpg"
    assert export_object_path("u1", name) == "exports/u1/enhanced-design-1700000000000.jpg"


class TestRendering:
    def test_canvas_background(self):
        image = render_canvas()
        assert image.size == (800, 600)
        assert image.getpixel((0, 0)) == Image.new("RGB", (1, 1), CANVAS_COLOR).getpixel((0, 0))

    def test_canvas_has_text(self):
        image = render_canvas(400, 300)
        colors = image.getcolors(maxcolors=400 * 300)
        assert len(colors) > 1

    def test_tiny_canvas(self):
        assert render_canvas(10, 10).size == (10, 10)

    def test_png_preview(self):
        content, media_type = render_preview(ExportFormat.PNG)
        assert media_type == "image/png"
        with Image.open(io.BytesIO(content)) as image:
            assert image.format == "PNG"
            assert image.size == (800, 600)

    def test_jpeg_quality_changes_size(self):
        high, _ = render_preview(ExportFormat.JPG, ExportQuality.high)
        low, media_type = render_preview(ExportFormat.JPG, ExportQuality.low)
        assert media_type == "image/jpeg"
        assert len(low) < len(high)

    def test_pdf_preview(self):
        content, media_type = render_preview(ExportFormat.PDF, width=200, height=100)
        assert media_type == "application/pdf"
        assert content.startswith(b"%PDF")

    def test_svg_preview(self):
        content, media_type = render_preview(ExportFormat.SVG, width=400, height=300)
        assert media_type == "image/svg+xml"
        svg = content.decode("utf-8")
        assert 'width="400"' in svg
        assert 'height="300"' in svg
        assert 'font-size="24"' in svg

    def test_svg_default_layout(self):
        svg = render_svg()
        assert 'x="400" y="300"' in svg
        assert 'y="350"' in svg
        assert f'fill="{CANVAS_COLOR}"' in svg
