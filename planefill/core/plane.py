from __future__ import annotations

from planefill.core.dataset import Dataset
from planefill.core.errors import BoundsViolation


def checked_position(dataset: Dataset, position) -> list[int]:
    position = [int(p) for p in position]
    if len(position) != dataset.ndim:
        raise ValueError(
            f"Position {tuple(position)} does not match the {dataset.ndim} "
            f"axes of {dataset!r}."
        )
    return position


class PlaneAccessor:
    """Reads pixels of one (u, v) plane of a dataset.

    Every axis other than ``u_axis``, ``v_axis`` and ``color_axis`` stays at
    the coordinate given by ``position``.
    """

    def __init__(
        self,
        dataset: Dataset,
        position,
        u_axis: int,
        v_axis: int,
        color_axis: int | None = None,
    ):
        self.dataset = dataset
        self.u_axis = u_axis
        self.v_axis = v_axis
        self.color_axis = color_axis
        self.max_u = dataset.dimension(u_axis) - 1
        self.max_v = dataset.dimension(v_axis) - 1
        self._index = checked_position(dataset, position)

    def in_bounds(self, u: int, v: int) -> bool:
        return 0 <= u <= self.max_u and 0 <= v <= self.max_v

    def _locate(self, u: int, v: int) -> list[int]:
        if not self.in_bounds(u, v):
            raise BoundsViolation(u, v, self.max_u, self.max_v)
        index = self._index
        index[self.u_axis] = u
        index[self.v_axis] = v
        return index

    def read_value(self, u: int, v: int) -> float:
        index = self._locate(u, v)
        return float(self.dataset.data[tuple(index)])

    def read_color(self, u: int, v: int) -> tuple[float, float, float]:
        if self.color_axis is None:
            raise ValueError("Plane has no color axis.")
        index = self._locate(u, v)
        fixed_channel = index[self.color_axis]
        data = self.dataset.data
        components = []
        for channel in range(3):
            index[self.color_axis] = channel
            components.append(float(data[tuple(index)]))
        index[self.color_axis] = fixed_channel
        return components[0], components[1], components[2]
