"""A rectangular camera over a scene, mapped onto a viewport of the output surface."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from agptools.geometry import Rect, Vec2D


class View:
    """Camera with ``rect`` in scene coordinates, shown through a viewport.

    The viewport is given in relative [0, 1] coordinates of an output surface
    of ``output_size`` pixels. A non-zero ``aspect_ratio`` (width / height)
    keeps the viewport at that ratio, centred.
    """

    def __init__(
        self,
        rect: Rect,
        output_size: tuple[int, int],
        viewport: Optional[Rect] = None,
        aspect_ratio: float = 0.0,
    ) -> None:
        self._rect = replace(rect)
        self._output_size = tuple(output_size)
        self._viewport = replace(viewport) if viewport is not None else Rect(0.0, 0.0, 1.0, 1.0)
        self._aspect_ratio = aspect_ratio
        self.viewport_abs = Rect()
        self.magnification = Vec2D(1, 1)
        self.update_viewport()

    @property
    def rect(self) -> Rect:
        return replace(self._rect)

    @rect.setter
    def rect(self, value: Rect) -> None:
        self._rect = replace(value)
        self.update_viewport()

    @property
    def viewport(self) -> Rect:
        return replace(self._viewport)

    @viewport.setter
    def viewport(self, value: Rect) -> None:
        self._viewport = replace(value)
        self.update_viewport()

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value: float) -> None:
        self._aspect_ratio = value
        self.update_viewport()

    @property
    def output_size(self) -> tuple[int, int]:
        return self._output_size

    @output_size.setter
    def output_size(self, value: tuple[int, int]) -> None:
        self._output_size = tuple(value)
        self.update_viewport()

    def move(self, dx, dy: Optional[float] = None) -> None:
        """Shift the view by a vector or by ``(dx, dy)``."""
        delta = dx if isinstance(dx, Vec2D) and dy is None else Vec2D(dx, dy)
        self._rect.x += delta.x
        self._rect.y += delta.y
        self.update_viewport()

    def scale(self, f: float) -> None:
        """Scale the size of the view rect, keeping its position."""
        self._rect = self._rect * f
        self.update_viewport()

    def update_viewport(self) -> None:
        """Recompute the absolute viewport and the magnification factor."""
        width, height = self._output_size
        vp = self._viewport
        abs_rect = Rect(vp.x * width, vp.y * height, vp.width * width, vp.height * height)
        if self._aspect_ratio:
            current = abs_rect.width / abs_rect.height
            if current > self._aspect_ratio:
                new_width = abs_rect.height * self._aspect_ratio
                abs_rect.x += (abs_rect.width - new_width) / 2
                abs_rect.width = new_width
            else:
                new_height = abs_rect.width / self._aspect_ratio
                abs_rect.y += (abs_rect.height - new_height) / 2
                abs_rect.height = new_height
        self.viewport_abs = abs_rect
        self.magnification = Vec2D(
            abs_rect.width / self._rect.width,
            abs_rect.height / self._rect.height,
        )

    def map_to_scene(self, point: Vec2D) -> Vec2D:
        """Map an output-surface point to scene coordinates."""
        va, m, r = self.viewport_abs, self.magnification, self._rect
        return Vec2D((point.x - va.x) / m.x + r.x, (point.y - va.y) / m.y + r.y)

    def map_from_scene(self, point: Vec2D) -> Vec2D:
        """Map a scene point to output-surface coordinates."""
        va, m, r = self.viewport_abs, self.magnification, self._rect
        return Vec2D(va.x + (point.x - r.x) * m.x, va.y + (point.y - r.y) * m.y)

    def map_rect_to_scene(self, rect: Rect) -> Rect:
        va, m, r = self.viewport_abs, self.magnification, self._rect
        return Rect(
            (rect.x - va.x) / m.x + r.x,
            (rect.y - va.y) / m.y + r.y,
            rect.width / m.x,
            rect.height / m.y,
        )

    def map_rect_from_scene(self, rect: Rect) -> Rect:
        va, m, r = self.viewport_abs, self.magnification, self._rect
        return Rect(
            va.x + (rect.x - r.x) * m.x,
            va.y + (rect.y - r.y) * m.y,
            rect.width * m.x,
            rect.height * m.y,
        )