from __future__ import annotations

from typing import Protocol

import numpy as np
from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtGui import QColor

from planefill.core.dataset import Axes, Dataset
from planefill.core.errors import BoundsViolation
from planefill.core.plane import checked_position


class PaintSink(Protocol):
    """What the flood filler needs from the object that writes pixels."""

    dataset: Dataset
    u_axis: int
    v_axis: int
    position: tuple[int, ...]

    def set_position(self, position) -> None: ...

    def draw_run(self, u_start: int, u_end: int, v: int) -> None: ...

    def fill(self) -> None: ...

    def set_value(self, value) -> None: ...

    def current_value(self): ...


class DrawingTool(QObject):
    """
    Paints gray values or colours into one plane of a :class:`Dataset`.

    The plane is spanned by ``u_axis`` and ``v_axis``; every other axis stays
    at the coordinate stored in ``position``.
    """

    gray_value_changed = Signal(float)
    color_value_changed = Signal(QColor)
    position_changed = Signal(object)

    def __init__(self, dataset: Dataset, u_axis: int | None = None, v_axis: int | None = None):
        super().__init__()
        self.dataset = dataset
        self.u_axis = dataset.axis_index(Axes.X) if u_axis is None else u_axis
        self.v_axis = dataset.axis_index(Axes.Y) if v_axis is None else v_axis
        if self.u_axis == self.v_axis:
            raise ValueError("The u and v axes must differ.")
        self.color_axis = (
            dataset.axis_index(Axes.CHANNEL) if dataset.rgb_merged else None
        )
        self.position = tuple([0] * dataset.ndim)
        self.gray_value = self._storable(255)
        self.color_value = (self.gray_value,) * 3

    @property
    def max_u(self) -> int:
        return self.dataset.dimension(self.u_axis) - 1

    @property
    def max_v(self) -> int:
        return self.dataset.dimension(self.v_axis) - 1

    @Slot(object)
    def set_position(self, position):
        position = tuple(checked_position(self.dataset, position))
        if position == self.position:
            return
        self.position = position
        self.position_changed.emit(self.position)

    def _storable(self, value) -> float:
        """Returns ``value`` as the dataset will hold it once painted."""
        dtype = self.dataset.data.dtype
        if np.issubdtype(dtype, np.integer):
            info = np.iinfo(dtype)
            value = min(max(value, info.min), info.max)
        return float(dtype.type(value))

    @Slot(float)
    def set_gray_value(self, value):
        self.gray_value = self._storable(value)
        self.gray_value_changed.emit(self.gray_value)

    @Slot(QColor)
    def set_color_value(self, color):
        # Accepts a QColor or an (r, g, b) sequence
        if isinstance(color, QColor):
            red, green, blue = color.red(), color.green(), color.blue()
        else:
            red, green, blue = color
        self.color_value = (
            self._storable(red),
            self._storable(green),
            self._storable(blue),
        )
        self.color_value_changed.emit(
            QColor(*(int(max(0.0, min(255.0, c))) for c in self.color_value))
        )

    def set_value(self, value):
        """Sets the value painted from now on.

        An RGB dataset paints a scalar as a gray colour; a gray dataset
        refuses colours.
        """
        is_color = isinstance(value, (QColor, tuple, list))
        if self.dataset.rgb_merged:
            self.set_color_value(value if is_color else (value, value, value))
        elif is_color:
            raise ValueError(f"Can't paint colour {value!r} into a gray dataset.")
        else:
            self.set_gray_value(value)

    def current_value(self):
        if self.dataset.rgb_merged:
            return self.color_value
        return self.gray_value

    def draw_run(self, u_start: int, u_end: int, v: int):
        """Paints every pixel from ``u_start`` to ``u_end`` inclusive on row ``v``."""
        if u_start > u_end:
            u_start, u_end = u_end, u_start
        if u_start < 0 or u_end > self.max_u or not 0 <= v <= self.max_v:
            bad_u = u_start if u_start < 0 else u_end
            raise BoundsViolation(bad_u, v, self.max_u, self.max_v)
        index = list(self.position)
        index[self.u_axis] = slice(u_start, u_end + 1)
        index[self.v_axis] = v
        self._paint(index)

    def draw_line(self, u1: int, v1: int, u2: int, v2: int):
        if v1 != v2:
            raise ValueError("Only horizontal lines are supported.")
        self.draw_run(u1, u2, v1)

    def fill(self):
        """Paints the whole plane."""
        index = list(self.position)
        index[self.u_axis] = slice(None)
        index[self.v_axis] = slice(None)
        self._paint(index)

    def _paint(self, index: list):
        data = self.dataset.data
        if self.color_axis is None:
            data[tuple(index)] = self.gray_value
            return
        for channel, component in enumerate(self.color_value):
            index[self.color_axis] = channel
            data[tuple(index)] = component
