from __future__ import annotations

import numpy as np
from PIL import Image, ImageQt
from PySide6.QtGui import QImage


class Axes:
    """Names of the axes a dataset can carry."""

    X = "X"
    Y = "Y"
    Z = "Z"
    TIME = "Time"
    CHANNEL = "Channel"


def _default_axes(data: np.ndarray) -> tuple[str, ...]:
    if data.ndim == 2:
        return (Axes.Y, Axes.X)
    if data.ndim == 3 and data.shape[-1] == 3:
        return (Axes.Y, Axes.X, Axes.CHANNEL)
    if data.ndim == 3:
        return (Axes.Z, Axes.Y, Axes.X)
    raise ValueError(f"Axes must be given for a {data.ndim}-dimensional dataset.")


class Dataset:
    """
    N-dimensional pixel storage backed by a numpy array.

    ``axes`` names every dimension of ``data`` in order.  When the dataset is
    ``rgb_merged`` its ``Channel`` axis holds the red, green and blue
    components of a single colour pixel.
    """

    def __init__(
        self,
        data: np.ndarray,
        axes: tuple[str, ...] | list[str] | None = None,
        *,
        rgb_merged: bool | None = None,
        name: str = "",
    ):
        data = np.asarray(data)
        if axes is None:
            axes = _default_axes(data)
        axes = tuple(axes)
        if len(axes) != data.ndim:
            raise ValueError(
                f"Got {len(axes)} axes for a {data.ndim}-dimensional array."
            )
        if len(set(axes)) != len(axes):
            raise ValueError("Axis names must be unique.")

        self.data = data
        self.axes = axes
        self.name = name

        has_rgb_channel = (
            Axes.CHANNEL in axes and data.shape[axes.index(Axes.CHANNEL)] == 3
        )
        if rgb_merged is None:
            rgb_merged = has_rgb_channel
        elif rgb_merged and not has_rgb_channel:
            raise ValueError("An RGB merged dataset needs a Channel axis of size 3.")
        self.rgb_merged = bool(rgb_merged)

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        *,
        rgb: bool = False,
        value: float = 0,
        dtype=np.float64,
        name: str = "",
    ) -> "Dataset":
        shape = (height, width, 3) if rgb else (height, width)
        return cls(np.full(shape, value, dtype=dtype), name=name)

    @classmethod
    def from_image(cls, image: Image.Image, name: str = "") -> "Dataset":
        """Builds a dataset from a Pillow image, keeping grayscale images gray.

        Only modes that store gray values or RGB components directly are
        accepted; an alpha channel is dropped.
        """
        if image.mode in ("L", "F", "I", "RGB"):
            return cls(np.array(image), name=name)
        if image.mode == "RGBA":
            return cls(np.array(image)[..., :3].copy(), name=name)
        raise ValueError(f"Can't build a dataset from a {image.mode} image.")

    @classmethod
    def from_qimage(cls, image: QImage, name: str = "") -> "Dataset":
        return cls.from_image(ImageQt.fromqimage(image), name=name)

    def to_image(self) -> Image.Image:
        if self.axes not in ((Axes.Y, Axes.X), (Axes.Y, Axes.X, Axes.CHANNEL)):
            raise ValueError("Only (Y, X) and (Y, X, Channel) datasets convert to images.")
        return Image.fromarray(np.clip(self.data, 0, 255).astype(np.uint8))

    @property
    def shape(self) -> tuple[int, ...]:
        return self.data.shape

    @property
    def ndim(self) -> int:
        return self.data.ndim

    def axis_index(self, axis: str) -> int:
        try:
            return self.axes.index(axis)
        except ValueError:
            raise ValueError(f"Dataset has no {axis} axis.") from None

    def dimension(self, axis_index: int) -> int:
        return self.data.shape[axis_index]

    def copy(self) -> "Dataset":
        return Dataset(
            self.data.copy(), self.axes, rgb_merged=self.rgb_merged, name=self.name
        )

    def __repr__(self):
        return f"Dataset(name={self.name!r}, axes={self.axes}, shape={self.shape})"
