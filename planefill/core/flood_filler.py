"""Scanline flood filling of one plane of a dataset.

Each seed popped from the frontier is widened into the longest horizontal run
of matching pixels containing it.  The run is painted and the rows above and
below are scanned over the same columns; one new seed is pushed wherever a
matching stretch begins, so every stretch is queued once per run instead of
once per pixel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from planefill.core.dataset import Axes
from planefill.core.drawing_tool import PaintSink
from planefill.core.frontier import Frontier
from planefill.core.matcher import (
    Matcher,
    RangeMatcher,
    paint_matcher,
    reference_matcher,
)
from planefill.core.plane import PlaneAccessor
from planefill.core.settings import FillSettings

logger = logging.getLogger(__name__)


@dataclass
class FillContext:
    """State belonging to a single fill call."""

    plane: PlaneAccessor
    matcher: Matcher
    runs: int = 0

    @property
    def max_u(self) -> int:
        return self.plane.max_u

    @property
    def max_v(self) -> int:
        return self.plane.max_v

    def matches(self, u: int, v: int) -> bool:
        return self.matcher.matches(u, v)


class FloodFiller:
    """
    Fills regions of contiguous pixels in a plane of the dataset painted by
    ``tool``.  Whether pixels are compared as gray values or as RGB colours is
    fixed here from the dataset's channel layout.

    A filler keeps its frontier between calls and is not reentrant: run one
    fill at a time.
    """

    def __init__(self, tool: PaintSink, settings: FillSettings | None = None):
        self.tool = tool
        self.settings = settings if settings is not None else FillSettings()
        self.is_color = tool.dataset.rgb_merged
        if self.is_color:
            self.color_axis = tool.dataset.axis_index(Axes.CHANNEL)
        else:
            self.color_axis = None
        self.frontier = Frontier(self.settings.frontier_capacity)

    def fill(self, u0: int, v0: int, position, connectivity: int | None = None) -> bool:
        """Runs :meth:`fill4` or :meth:`fill8`, defaulting to the configured connectivity."""
        if connectivity is None:
            connectivity = self.settings.connectivity
        if connectivity == 4:
            return self.fill4(u0, v0, position)
        if connectivity == 8:
            return self.fill8(u0, v0, position)
        raise ValueError(f"Connectivity must be 4 or 8, not {connectivity}.")

    def fill4(self, u0: int, v0: int, position) -> bool:
        """
        Does a 4-connected flood fill using the tool's current value.  Returns
        True if any pixels changed and False if the seed already holds the
        fill value.
        """
        context = self._begin(u0, v0, position)
        if context is None:
            return False
        frontier = self.frontier
        while not frontier.is_empty():
            u, v = frontier.pop()
            if not context.matches(u, v):
                continue
            u1, u2 = self._find_run(context, u, v)
            self._paint_run(context, u1, u2, v)
            self._push_run_starts(context, u1, u2, v - 1)
            self._push_run_starts(context, u1, u2, v + 1)
        self._finish("fill4", context)
        return True

    def fill8(self, u0: int, v0: int, position) -> bool:
        """
        Does an 8-connected flood fill using the tool's current value.  Returns
        True if any pixels changed and False if the seed already holds the
        fill value.
        """
        context = self._begin(u0, v0, position)
        if context is None:
            return False
        frontier = self.frontier
        max_u = context.max_u
        max_v = context.max_v
        while not frontier.is_empty():
            u, v = frontier.pop()
            # A stale seed still checks its neighbours as a zero-width run at u.
            u1 = u2 = u
            if context.matches(u, v):
                u1, u2 = self._find_run(context, u, v)
                self._paint_run(context, u1, u2, v)
            for row in (v - 1, v + 1):
                if not 0 <= row <= max_v:
                    continue
                if u1 > 0 and context.matches(u1 - 1, row):
                    frontier.push(u1 - 1, row)
                if u2 < max_u and context.matches(u2 + 1, row):
                    frontier.push(u2 + 1, row)
            self._push_run_starts(context, u1, u2, v - 1)
            self._push_run_starts(context, u1, u2, v + 1)
        self._finish("fill8", context)
        return True

    def particle_analyzer_fill(
        self,
        u0: int,
        v0: int,
        position,
        level1: float,
        level2: float,
        mask_tool: PaintSink,
        bounds,
    ) -> None:
        """
        Fills the pixels connected to (u0, v0) whose value lies in
        ``[level1, level2]``, painting them in the image and in ``mask_tool``.
        The mask is cleared first and is addressed relative to the top left
        corner of ``bounds``.  Used to remove interior holes from particle
        masks.
        """
        plane = self._plane(position, color=False)
        fill_value = self.tool.current_value()
        if self.is_color:
            fill_value = fill_value[int(position[self.color_axis])]
        if level1 <= fill_value <= level2:
            raise ValueError(
                f"Fill value {fill_value} lies inside the range "
                f"[{level1}, {level2}] being filled."
            )
        context = FillContext(plane, RangeMatcher(plane, level1, level2))
        max_u = context.max_u

        mask_tool.set_value(0)
        mask_tool.fill()
        mask_tool.set_value(self.settings.mask_value)
        origin_u = bounds.x()
        origin_v = bounds.y()

        self.tool.set_position(position)
        frontier = self.frontier
        frontier.clear()
        frontier.push(u0, v0)
        while not frontier.is_empty():
            u, v = frontier.pop()
            if not context.matches(u, v):
                continue
            u1, u2 = self._find_run(context, u, v)
            mask_tool.draw_run(int(u1 - origin_u), int(u2 - origin_u), int(v - origin_v))
            self._paint_run(context, u1, u2, v)
            # Widen by one so diagonal neighbours get scanned too
            if u1 > 0:
                u1 -= 1
            if u2 < max_u:
                u2 += 1
            self._push_run_starts(context, u1, u2, v - 1)
            self._push_run_starts(context, u1, u2, v + 1)
        self._finish("particle_analyzer_fill", context)

    fill_region_with_mask = particle_analyzer_fill

    # -- private helpers --

    def _plane(self, position, color: bool = True) -> PlaneAccessor:
        return PlaneAccessor(
            self.tool.dataset,
            position,
            self.tool.u_axis,
            self.tool.v_axis,
            self.color_axis if color else None,
        )

    def _begin(self, u0: int, v0: int, position) -> FillContext | None:
        """Samples the seed and primes the frontier, or returns None when the
        seed already has the fill value."""
        plane = self._plane(position)
        if paint_matcher(plane, self.tool).matches(u0, v0):
            logger.debug("Seed (%d, %d) already has the fill value", u0, v0)
            return None
        context = FillContext(plane, reference_matcher(plane, u0, v0))
        self.tool.set_position(position)
        self.frontier.clear()
        self.frontier.push(u0, v0)
        return context

    def _find_run(self, context: FillContext, u: int, v: int) -> tuple[int, int]:
        u1 = u
        while u1 >= 0 and context.matches(u1, v):
            u1 -= 1
        u2 = u
        while u2 <= context.max_u and context.matches(u2, v):
            u2 += 1
        return u1 + 1, u2 - 1

    def _paint_run(self, context: FillContext, u1: int, u2: int, v: int):
        self.tool.draw_run(u1, u2, v)
        context.runs += 1

    def _push_run_starts(self, context: FillContext, u1: int, u2: int, row: int):
        """Pushes the first column of every matching stretch of ``row`` in [u1, u2]."""
        if not 0 <= row <= context.max_v:
            return
        in_run = False
        for i in range(u1, u2 + 1):
            if context.matches(i, row):
                if not in_run:
                    self.frontier.push(i, row)
                    in_run = True
            else:
                in_run = False

    def _finish(self, name: str, context: FillContext):
        logger.debug(
            "%s painted %d runs, frontier capacity %d",
            name,
            context.runs,
            self.frontier.capacity,
        )
