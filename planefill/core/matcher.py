"""Pixel predicates deciding which pixels belong to the region being filled.

Gray and colour matchers compare for exact equality with a reference value,
the range matcher accepts any scalar within ``[level1, level2]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from planefill.core.plane import PlaneAccessor


@dataclass(frozen=True)
class GrayMatcher:
    plane: PlaneAccessor
    value: float

    def matches(self, u: int, v: int) -> bool:
        return self.plane.read_value(u, v) == self.value


@dataclass(frozen=True)
class ColorMatcher:
    plane: PlaneAccessor
    color: tuple[float, float, float]

    def matches(self, u: int, v: int) -> bool:
        red, green, blue = self.plane.read_color(u, v)
        return red == self.color[0] and green == self.color[1] and blue == self.color[2]


@dataclass(frozen=True)
class RangeMatcher:
    plane: PlaneAccessor
    level1: float
    level2: float

    def matches(self, u: int, v: int) -> bool:
        value = self.plane.read_value(u, v)
        return self.level1 <= value <= self.level2


Matcher = GrayMatcher | ColorMatcher | RangeMatcher


def reference_matcher(plane: PlaneAccessor, u: int, v: int) -> GrayMatcher | ColorMatcher:
    """Samples the pixel at (u, v) and returns a matcher for that value."""
    if plane.color_axis is not None:
        return ColorMatcher(plane, plane.read_color(u, v))
    return GrayMatcher(plane, plane.read_value(u, v))


def paint_matcher(plane: PlaneAccessor, tool) -> GrayMatcher | ColorMatcher:
    """Returns a matcher for the value ``tool`` currently paints with."""
    value = tool.current_value()
    if plane.color_axis is not None:
        return ColorMatcher(plane, tuple(float(c) for c in value))
    return GrayMatcher(plane, float(value))
