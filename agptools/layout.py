"""Outline geometry for debug drawing and texture-atlas layout for image sequences."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from agptools.geometry import Rect, RotatedRect, Vec2D
from agptools.mathutils import PI

Segment = tuple[Vec2D, Vec2D]


def _on_circle(center: Vec2D, radius: float, angle: float) -> Vec2D:
    return Vec2D(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def circle_segments(
    center: Vec2D,
    radius: float,
    n_segments: int = 100,
    angle_start: float = 0.0,
    angle_end: float = 2 * PI,
) -> list[Segment]:
    """Line segments approximating the arc from ``angle_start`` to ``angle_end``."""
    if n_segments <= 0:
        raise ValueError("n_segments must be positive")
    step = (angle_end - angle_start) / n_segments
    return [
        (
            _on_circle(center, radius, angle_start + i * step),
            _on_circle(center, radius, angle_start + (i + 1) * step),
        )
        for i in range(n_segments)
    ]


def capsule_outline(
    center_down: Vec2D,
    center_up: Vec2D,
    radius: float,
    n_segments: int = 100,
) -> list[Segment]:
    """Segments outlining a capsule: two half circles joined by two lines."""
    angle = math.atan2(center_up.y - center_down.y, center_up.x - center_down.x) + PI / 2
    segments = circle_segments(center_up, radius, n_segments, angle - PI, angle)
    segments += circle_segments(center_down, radius, n_segments, angle, PI + angle)
    a_up = _on_circle(center_up, radius, angle - PI)
    b_up = _on_circle(center_up, radius, angle)
    b_down = _on_circle(center_down, radius, angle)
    a_down = _on_circle(center_down, radius, PI + angle)
    segments.append((a_up, a_down))
    segments.append((b_up, b_down))
    return segments


def obb_edges(obb: RotatedRect) -> list[Segment]:
    """The four edges of a rotated rectangle, in vertex order."""
    verts = obb.vertices()
    return list(zip(verts, verts[1:] + verts[:1]))


def sequence_layout(
    count: int,
    image_width: int,
    image_height: int,
    max_texture_width: int,
    max_texture_height: int,
    adjust_pos: Optional[Vec2D] = None,
    adjust_size: Optional[Vec2D] = None,
) -> tuple[int, int, list[Rect]]:
    """Lay ``count`` equal images row by row in one texture.

    Returns the texture width, its height and each image's rect, adjusted by
    ``adjust_pos`` (position corner) and ``adjust_size`` (opposite corner).
    Raises ValueError when nothing can be laid out or the result does not fit.
    """
    if count <= 0:
        raise ValueError("No images to lay out")
    if not max_texture_width or not max_texture_height:
        raise ValueError("Maximum texture size is unknown")
    if image_width <= 0 or image_height <= 0:
        raise ValueError("Image size must be positive")
    images_per_row = max_texture_width // image_width
    if images_per_row == 0:
        raise ValueError("Cannot fit images within maximum texture size")
    num_rows = count // images_per_row + 1
    total_height = num_rows * image_height
    if total_height > max_texture_height:
        raise ValueError("Cannot fit images within maximum texture size")
    total_width = images_per_row * image_width
    if num_rows == 1:
        total_width = image_width * count
    adjust_pos = adjust_pos or Vec2D(0, 0)
    adjust_size = adjust_size or Vec2D(0, 0)
    rects = []
    for i in range(count):
        row, col = divmod(i, images_per_row)
        rect = Rect(col * image_width, row * image_height, image_width, image_height)
        rect.adjust(adjust_pos.x, adjust_pos.y, adjust_size.x, adjust_size.y)
        rects.append(rect)
    return total_width, total_height, rects


def move_by(
    rect: Rect,
    x: int,
    y: int,
    dx: int = 16,
    dy: int = 16,
    border_x: int = 1,
    border_y: int = 1,
) -> Rect:
    """Rect moved by ``x`` columns and ``y`` rows of a bordered sprite grid."""
    return replace(rect, x=rect.x + x * dx + x * border_x, y=rect.y + y * dy + y * border_y)