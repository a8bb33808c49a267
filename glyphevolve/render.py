"""Rasterising genotypes into grey pixel buffers and comparing them with a target."""

from __future__ import annotations

import io
import math
import os

from PIL import Image, ImageDraw, ImageFont

from glyphevolve.genotype import MAX_COORD, RENDER_SIZE, Genotype

RASTER_FONT_SIZE_RATIO = 0.75

PixelBuffer = bytearray


def create_pixel_buffer() -> PixelBuffer:
    """Return a black RENDER_SIZE x RENDER_SIZE buffer."""
    return bytearray(RENDER_SIZE * RENDER_SIZE)


def set_pixel(buffer: PixelBuffer, x: int, y: int, color: int) -> None:
    """Write ``color`` at (x, y); writes past the end of the buffer are ignored."""
    index = y * RENDER_SIZE + x
    if 0 <= index < len(buffer):
        buffer[index] = color


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _fpart(value: float) -> float:
    return value - math.floor(value)


def _rfpart(value: float) -> float:
    return 1.0 - _fpart(value)


def _blend(buffer: PixelBuffer, x: int, y: int, intensity: float) -> None:
    if 0 <= x < RENDER_SIZE and 0 <= y < RENDER_SIZE:
        color = min(255, max(0, _round(intensity * 255.0)))
        index = y * RENDER_SIZE + x
        buffer[index] = max(buffer[index], color)


def _scale_coord(coord: int) -> float:
    return coord / MAX_COORD * (RENDER_SIZE - 1)


def draw_line(buffer: PixelBuffer, x0: float, y0: float, x1: float, y1: float) -> None:
    """Draw an anti-aliased line with Xiaolin Wu's algorithm, keeping brighter pixels."""
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    if abs(dx) < 1e-6:
        gradient = 1.0e6 if dy >= 0.0 else -1.0e6
    else:
        gradient = dy / dx

    def plot(x: int, y: int, intensity: float) -> None:
        if steep:
            _blend(buffer, y, x, intensity)
        else:
            _blend(buffer, x, y, intensity)

    def endpoint(x: float, y: float) -> tuple[int, float]:
        x_end = _round(x)
        y_end = y + gradient * (x_end - x)
        x_gap = _rfpart(x + 0.5)
        y_px = math.floor(y_end)
        plot(x_end, y_px, _rfpart(y_end) * x_gap)
        plot(x_end, y_px + 1, _fpart(y_end) * x_gap)
        return x_end, y_end

    x_px_0, y_end_0 = endpoint(x0, y0)
    inter_y = y_end_0 + gradient
    x_px_1, _ = endpoint(x1, y1)

    for x in range(x_px_0 + 1, x_px_1):
        y_px = math.floor(inter_y)
        plot(x, y_px, _rfpart(inter_y))
        plot(x, y_px + 1, _fpart(inter_y))
        inter_y += gradient


def render_genotype(genotype: Genotype) -> PixelBuffer:
    """Render every line of ``genotype`` into a fresh buffer."""
    buffer = create_pixel_buffer()
    for line in genotype.lines:
        draw_line(
            buffer,
            _scale_coord(line.start.x),
            _scale_coord(line.start.y),
            _scale_coord(line.end.x),
            _scale_coord(line.end.y),
        )
    return buffer


def render_target_glyph(font_path: str | os.PathLike, char: str) -> PixelBuffer:
    """Rasterise ``char`` from the font at ``font_path``, centred on the canvas."""
    try:
        with open(font_path, "rb") as handle:
            font_bytes = handle.read()
    except OSError as exc:
        raise OSError(f"Failed to read font file: {exc}") from exc

    raster_px_size = max(RENDER_SIZE * RASTER_FONT_SIZE_RATIO, 1.0)
    try:
        font = ImageFont.truetype(io.BytesIO(font_bytes), int(raster_px_size))
    except OSError as exc:
        raise OSError(f"Failed to load font: {exc}") from exc

    ascent, descent = font.getmetrics()
    typographic_height = ascent + descent
    margin_y = (RENDER_SIZE - typographic_height) / 2.0
    baseline_y = _round(margin_y + ascent)

    left, _top, right, _bottom = font.getbbox(char, anchor="ls")
    width = right - left
    origin_x = int((RENDER_SIZE - width) / 2)

    image = Image.new("L", (RENDER_SIZE, RENDER_SIZE), 0)
    ImageDraw.Draw(image).text((origin_x, baseline_y), char, fill=255, font=font, anchor="ls")
    return bytearray(image.tobytes())


def save_buffer(buffer: PixelBuffer, filename: str | os.PathLike) -> None:
    """Save ``buffer`` as a greyscale image; the format follows the file extension."""
    if len(buffer) != RENDER_SIZE * RENDER_SIZE:
        raise ValueError("Failed to create image from buffer")
    Image.frombytes("L", (RENDER_SIZE, RENDER_SIZE), bytes(buffer)).save(filename)


def calculate_mse(buffer_a: PixelBuffer, buffer_b: PixelBuffer) -> float:
    """Return the mean squared error between two equally sized buffers."""
    if len(buffer_a) != len(buffer_b):
        raise ValueError("Buffer sizes must match!")
    if not buffer_a:
        return math.nan
    total = sum((a - b) * (a - b) for a, b in zip(buffer_a, buffer_b))
    return total / len(buffer_a)