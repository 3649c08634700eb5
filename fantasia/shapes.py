"""Geometry, transformable drawables and reusable GUI shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator

import pygame

_COORD_LIMIT = 1.0e6


@dataclass(frozen=True)
class Vector2:
    """A 2D point or offset."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Any) -> Vector2:
        ox, oy = other
        return Vector2(self.x + ox, self.y + oy)

    def __sub__(self, other: Any) -> Vector2:
        ox, oy = other
        return Vector2(self.x - ox, self.y - oy)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Any) -> bool:
        """Whether ``point`` lies inside; the right and bottom edges are excluded."""
        x, y = point
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= x < max_x and min_y <= y < max_y


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(eq=False)
class Texture:
    """Image data of a known size, optionally backed by a pygame surface."""

    width: int
    height: int
    smooth: bool = False
    surface: pygame.Surface | None = field(default=None, repr=False)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)


@dataclass(eq=False)
class Font:
    """A typeface; ``path`` of None selects pygame's built-in font."""

    family: str
    path: str | None = None
    _renderers: dict[int, pygame.font.Font] = field(
        default_factory=dict, init=False, repr=False
    )

    def _renderer(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        renderer = self._renderers.get(size)
        if renderer is None:
            source = None if self.path is None else str(self.path)
            renderer = self._renderers[size] = pygame.font.Font(source, size)
        return renderer

    def measure(self, text: str, size: int) -> Vector2:
        """Return the width and height of ``text`` rendered at ``size``."""
        width, height = self._renderer(int(size)).size(text)
        return Vector2(float(width), float(height))


def _as_vector(value: Any, default: Vector2) -> Vector2:
    if value is None:
        return default
    if isinstance(value, Vector2):
        return value
    x, y = value
    return Vector2(float(x), float(y))


class Transformable:
    """Position, scale, rotation (degrees, clockwise) and origin of a drawable."""

    def __init__(
        self,
        position: Any = None,
        scale: Any = None,
        origin: Any = None,
        rotation: float = 0.0,
    ) -> None:
        self.position = _as_vector(position, Vector2())
        self.scale = _as_vector(scale, Vector2(1.0, 1.0))
        self.origin = _as_vector(origin, Vector2())
        self.rotation = float(rotation)

    def move(self, dx: float, dy: float) -> None:
        """Shift the position by the given offset."""
        self.position = Vector2(self.position.x + dx, self.position.y + dy)

    def rotate(self, angle: float) -> None:
        """Add ``angle`` degrees to the rotation, kept within [0, 360)."""
        self.rotation = (self.rotation + angle) % 360.0

    def _transform_point(self, point: Any) -> Vector2:
        px, py = point
        x = (px - self.origin.x) * self.scale.x
        y = (py - self.origin.y) * self.scale.y
        if self.rotation:
            rad = math.radians(self.rotation)
            cos, sin = math.cos(rad), math.sin(rad)
            x, y = cos * x - sin * y, sin * x + cos * y
        return Vector2(x + self.position.x, y + self.position.y)

    def _transform_rect(self, rect: FloatRect) -> FloatRect:
        corners = [
            self._transform_point((rect.left, rect.top)),
            self._transform_point((rect.left + rect.width, rect.top)),
            self._transform_point((rect.left, rect.top + rect.height)),
            self._transform_point((rect.left + rect.width, rect.top + rect.height)),
        ]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def _blit_image(self, target: pygame.Surface, image: pygame.Surface) -> None:
        width = round(abs(image.get_width() * self.scale.x))
        height = round(abs(image.get_height() * self.scale.y))
        if width == 0 or height == 0:
            return
        if (width, height) != image.get_size():
            image = pygame.transform.scale(image, (width, height))
        if self.scale.x < 0 or self.scale.y < 0:
            image = pygame.transform.flip(image, self.scale.x < 0, self.scale.y < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        bounds = self.global_bounds()
        target.blit(image, (round(bounds.left), round(bounds.top)))

    def local_bounds(self) -> FloatRect:
        return FloatRect()

    def global_bounds(self) -> FloatRect:
        """Bounding box of the drawable after its transform is applied."""
        return self._transform_rect(self.local_bounds())


class Sprite(Transformable):
    """A textured rectangle."""

    def __init__(self, texture: Texture | None = None, **transform: Any) -> None:
        super().__init__(**transform)
        self.texture = texture

    def local_bounds(self) -> FloatRect:
        if self.texture is None:
            return FloatRect()
        return FloatRect(0.0, 0.0, float(self.texture.width), float(self.texture.height))

    def global_bounds(self) -> FloatRect:
        return self._transform_rect(self.local_bounds())

    def draw(self, target: pygame.Surface) -> None:
        """Blit the texture onto ``target`` if it has image data."""
        texture = self.texture
        if texture is None or texture.surface is None:
            return
        image = texture.surface
        width = round(abs(texture.width * self.scale.x))
        height = round(abs(texture.height * self.scale.y))
        if width == 0 or height == 0:
            return
        if texture.smooth and image.get_bitsize() in (24, 32):
            image = pygame.transform.smoothscale(image, (width, height))
            saved = self.scale
            self.scale = Vector2(
                math.copysign(1.0, saved.x) * width / image.get_width(),
                math.copysign(1.0, saved.y) * height / image.get_height(),
            )
            try:
                self._blit_scaled(target, image, saved)
            finally:
                self.scale = saved
            return
        self._blit_image(target, image)

    def _blit_scaled(
        self, target: pygame.Surface, image: pygame.Surface, scale: Vector2
    ) -> None:
        if scale.x < 0 or scale.y < 0:
            image = pygame.transform.flip(image, scale.x < 0, scale.y < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        self.scale = scale
        bounds = self.global_bounds()
        target.blit(image, (round(bounds.left), round(bounds.top)))


class Text(Transformable):
    """A single line of text in a given font."""

    def __init__(
        self,
        string: str = "",
        font: Font | None = None,
        character_size: int = 30,
        fill_color: Color = Color.WHITE,
        outline_color: Color = Color.BLACK,
        outline_thickness: float = 0.0,
        **transform: Any,
    ) -> None:
        super().__init__(**transform)
        self.string = string
        self.font = font
        self.character_size = character_size
        self.fill_color = fill_color
        self.outline_color = outline_color
        self.outline_thickness = outline_thickness

    def local_bounds(self) -> FloatRect:
        if self.font is None or not self.string:
            return FloatRect()
        size = self.font.measure(self.string, self.character_size)
        return FloatRect(0.0, 0.0, size.x, size.y)

    def draw(self, target: pygame.Surface) -> None:
        """Render the text onto ``target``."""
        if self.font is None or not self.string:
            return
        renderer = self.font._renderer(int(self.character_size))
        color = self.fill_color
        image = renderer.render(self.string, True, (color.r, color.g, color.b))
        if color.a < 255:
            image.set_alpha(color.a)
        self._blit_image(target, image)


def _clamp(value: float) -> float:
    return max(-_COORD_LIMIT, min(_COORD_LIMIT, value))


class RoundedRect(Transformable):
    """A rectangle whose four corners are arcs of ``radius``."""

    def __init__(
        self,
        size: Any = None,
        radius: float = 0.0,
        corner_point_count: int = 0,
        *,
        fill_color: Color = Color.WHITE,
        outline_color: Color = Color.WHITE,
        outline_thickness: float = 0.0,
        **transform: Any,
    ) -> None:
        super().__init__(**transform)
        self.size = _as_vector(size, Vector2())
        self.radius = float(radius)
        self.corner_point_count = int(corner_point_count)
        self.fill_color = fill_color
        self.outline_color = outline_color
        self.outline_thickness = float(outline_thickness)

    def point_count(self) -> int:
        return self.corner_point_count * 4

    def point(self, index: int) -> Vector2:
        """Return the outline point ``index`` in local coordinates."""
        count = self.corner_point_count
        if index < 0 or index >= count * 4:
            return Vector2()
        delta_angle = 90.0 / (count - 1) if count > 1 else math.inf
        corner = index // count
        r = self.radius
        width, height = self.size
        cx, cy = (
            (width - r, r),
            (r, r),
            (r, height - r),
            (width - r, height - r),
        )[corner]
        angle = math.radians(delta_angle * (index - corner))
        return Vector2(r * math.cos(angle) + cx, -r * math.sin(angle) + cy)

    def _points(self) -> list[Vector2]:
        return [self.point(i) for i in range(self.point_count())]

    def local_bounds(self) -> FloatRect:
        if self.point_count() < 3:
            return FloatRect()
        points = self._points()
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        pad = max(self.outline_thickness, 0.0)
        return FloatRect(
            min(xs) - pad,
            min(ys) - pad,
            max(xs) - min(xs) + 2 * pad,
            max(ys) - min(ys) + 2 * pad,
        )

    def global_bounds(self) -> FloatRect:
        return self._transform_rect(self.local_bounds())

    def draw(self, target: pygame.Surface) -> None:
        """Fill (and outline) the shape onto ``target``."""
        if self.point_count() < 3:
            return
        points = [self._transform_point(p) for p in self._points()]
        if not all(math.isfinite(p.x) and math.isfinite(p.y) for p in points):
            return
        points = [Vector2(_clamp(p.x), _clamp(p.y)) for p in points]
        pad = math.ceil(max(self.outline_thickness, 0.0)) + 1
        min_x = math.floor(min(p.x for p in points)) - pad
        min_y = math.floor(min(p.y for p in points)) - pad
        max_x = math.ceil(max(p.x for p in points)) + pad
        max_y = math.ceil(max(p.y for p in points)) + pad
        target_w, target_h = target.get_size()
        left, top = max(min_x, 0), max(min_y, 0)
        right, bottom = min(max_x, target_w), min(max_y, target_h)
        if right <= left or bottom <= top:
            return
        layer = pygame.Surface((right - left, bottom - top), pygame.SRCALPHA)
        local = [(p.x - left, p.y - top) for p in points]
        pygame.draw.polygon(layer, self.fill_color.rgba, local)
        if self.outline_thickness > 0:
            pygame.draw.polygon(
                layer,
                self.outline_color.rgba,
                local,
                width=max(1, round(self.outline_thickness)),
            )
        target.blit(layer, (left, top))


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class ProgressBar:
    """A horizontal bar whose filled part shows ``value`` out of ``max_value``."""

    _HEIGHT = 11.0
    _RADIUS = 1.2

    def __init__(
        self, width: float, fg_color: Color, pos_x: float, pos_y: float
    ) -> None:
        self.width = float(width)
        self.value = 0.0
        self.max_value = 0.0
        position = Vector2(pos_x, pos_y)
        self.background = RoundedRect(
            Vector2(self.width, self._HEIGHT),
            self._RADIUS,
            4,
            fill_color=Color(189, 192, 185),
            position=position,
        )
        self.foreground = RoundedRect(
            Vector2(0.0, 0.0),
            self._RADIUS,
            4,
            fill_color=fg_color,
            position=position,
        )

    def set_value(self, value: float) -> None:
        self.value = float(value)
        self._refresh()

    def set_max_value(self, max_value: float) -> None:
        self.max_value = float(max_value)
        self._refresh()

    def _refresh(self) -> None:
        fg_width = _divide(self.value, self.max_value) * self.width
        self.foreground.radius = 0.0 if fg_width < 1.0 else self._RADIUS
        self.foreground.size = Vector2(fg_width, self._HEIGHT)

    def draw(self, target: pygame.Surface) -> None:
        self.background.draw(target)
        self.foreground.draw(target)