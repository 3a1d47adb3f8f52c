"""Scanline flood filling for planes of N-dimensional pixel datasets."""

from planefill.core.dataset import Axes, Dataset
from planefill.core.drawing_tool import DrawingTool
from planefill.core.errors import BoundsViolation, FloodFillError, FrontierUnderflow
from planefill.core.flood_filler import FloodFiller
from planefill.core.settings import FillSettings

__all__ = [
    "Axes",
    "BoundsViolation",
    "Dataset",
    "DrawingTool",
    "FillSettings",
    "FloodFillError",
    "FloodFiller",
    "FrontierUnderflow",
]
