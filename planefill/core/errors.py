class FloodFillError(Exception):
    """Base class for flood fill failures."""


class FrontierUnderflow(FloodFillError, IndexError):
    """Raised when popping a seed from an empty frontier."""


class BoundsViolation(FloodFillError, IndexError):
    """Raised when a pixel outside the working plane is read or painted."""

    def __init__(self, u: int, v: int, max_u: int, max_v: int):
        super().__init__(
            f"({u}, {v}) is outside the plane [0, {max_u}] x [0, {max_v}]"
        )
        self.u = u
        self.v = v
        self.max_u = max_u
        self.max_v = max_v
