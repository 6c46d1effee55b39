"""
Export helpers.

An export is recorded, not produced: the API hands back the public URL the
file would live at and a size estimate from a fixed table. The preview endpoint
renders the static branded canvas so a client has something to download.
"""

from __future__ import annotations

import io
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from expressfix.core.models.domain import ExportFormat, ExportQuality

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
CANVAS_COLOR = "#8B5CF6"
TEXT_COLOR = "#FFFFFF"
PREVIEW_TITLE = "ExpressFix Enhanced Design"
PREVIEW_SUBTITLE = "AI-Powered Design Enhancement"

ESTIMATED_SIZES = {
    ExportFormat.PNG: {ExportQuality.high: "2.5 MB", ExportQuality.medium: "1.2 MB", ExportQuality.low: "600 KB"},
    ExportFormat.JPG: {ExportQuality.high: "1.8 MB", ExportQuality.medium: "800 KB", ExportQuality.low: "400 KB"},
    ExportFormat.PDF: {ExportQuality.high: "3.2 MB", ExportQuality.medium: "1.5 MB", ExportQuality.low: "800 KB"},
    ExportFormat.SVG: {ExportQuality.high: "150 KB", ExportQuality.medium: "100 KB", ExportQuality.low: "50 KB"},
}
FALLBACK_SIZE = "1 MB"

MEDIA_TYPES = {
    ExportFormat.PNG: "image/png",
    ExportFormat.JPG: "image/jpeg",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.SVG: "image/svg+xml",
}

# Pillow format names
_PIL_FORMATS = {
    ExportFormat.PNG: "PNG",
    ExportFormat.JPG: "JPEG",
    ExportFormat.PDF: "PDF",
}

_JPEG_QUALITY = {ExportQuality.high: 95, ExportQuality.medium: 80, ExportQuality.low: 60}


def estimate_export_size(export_format: str, quality: str) -> str:
    """Human-readable size estimate; unknown combinations yield ``1 MB``."""
    try:
        return ESTIMATED_SIZES[ExportFormat(export_format)][ExportQuality(quality)]
    except (KeyError, ValueError):
        return FALLBACK_SIZE


def export_file_name(export_format: str, epoch_ms: int) -> str:
    return f"enhanced-design-{epoch_ms}.{export_format.lower()}"


def export_object_path(user_id: str, file_name: str) -> str:
    return f"exports/{user_id}/{file_name}"


def _centered(draw: ImageDraw.ImageDraw, center: Tuple[float, float], text: str, font) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) / 2 - left
    y = center[1] - (bottom - top) / 2 - top
    draw.text((x, y), text, fill=TEXT_COLOR, font=font)


def render_canvas(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Image.Image:
    """Draw the branded preview canvas.

    Font sizes and the subtitle offset scale with the canvas relative to the
    800x600 reference layout.
    """
    scale = min(width / DEFAULT_WIDTH, height / DEFAULT_HEIGHT)
    image = Image.new("RGB", (width, height), CANVAS_COLOR)
    draw = ImageDraw.Draw(image)
    title_font = ImageFont.load_default(size=max(1, round(48 * scale)))
    subtitle_font = ImageFont.load_default(size=max(1, round(24 * scale)))
    _centered(draw, (width / 2, height / 2), PREVIEW_TITLE, title_font)
    _centered(draw, (width / 2, height / 2 + 50 * scale), PREVIEW_SUBTITLE, subtitle_font)
    return image


def render_svg(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> str:
    scale = min(width / DEFAULT_WIDTH, height / DEFAULT_HEIGHT)
    cx = width / 2
    cy = height / 2
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        f'<rect width="100%" height="100%" fill="{CANVAS_COLOR}"/>'
        f'<text x="{cx:g}" y="{cy:g}" fill="{TEXT_COLOR}" font-family="Arial" font-size="{48 * scale:g}" '
        f'text-anchor="middle" dominant-baseline="middle">{PREVIEW_TITLE}</text>'
        f'<text x="{cx:g}" y="{cy + 50 * scale:g}" fill="{TEXT_COLOR}" font-family="Arial" '
        f'font-size="{24 * scale:g}" text-anchor="middle" dominant-baseline="middle">{PREVIEW_SUBTITLE}</text>'
        "</svg>"
    )


def render_preview(
    export_format: ExportFormat,
    quality: ExportQuality = ExportQuality.high,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Tuple[bytes, str]:
    """Render the preview in an export format.

    Returns:
        ``(content, media_type)``
    """
    width = width or DEFAULT_WIDTH
    height = height or DEFAULT_HEIGHT
    if export_format == ExportFormat.SVG:
        return render_svg(width, height).encode("utf-8"), MEDIA_TYPES[export_format]

    image = render_canvas(width, height)
    buf = io.BytesIO()
    if export_format == ExportFormat.JPG:
        image.save(buf, format=_PIL_FORMATS[export_format], quality=_JPEG_QUALITY[quality])
    else:
        image.save(buf, format=_PIL_FORMATS[export_format])
    return buf.getvalue(), MEDIA_TYPES[export_format]
