"""Board geometry and free-cell sampling for food placement."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

MIN_SIDE = 3


def check_dimensions(width: int, height: int) -> None:
    """Raise ``ValueError`` if the board has no interior cell."""
    if width < MIN_SIDE or height < MIN_SIDE:
        raise ValueError(
            f"Board dimensions must be at least {MIN_SIDE}x{MIN_SIDE}.",
        )


def on_border(width: int, height: int, x: int, y: int) -> bool:
    """Check whether a coordinate lies on (or beyond) the border ring."""
    return x <= 0 or y <= 0 or x >= width - 1 or y >= height - 1


def interior_mask(
    width: int,
    height: int,
    occupied: Iterable[tuple[int, int]] = (),
) -> np.ndarray:
    """Return a (height, width) boolean array of free interior cells.

    Indexing follows NumPy ordering, so cell ``(x, y)`` is ``mask[y, x]``.
    """
    check_dimensions(width, height)
    mask = np.zeros((height, width), dtype=bool)
    mask[1:-1, 1:-1] = True
    for x, y in occupied:
        if 0 <= x < width and 0 <= y < height:
            mask[y, x] = False
    return mask


def free_spot(
    width: int,
    height: int,
    occupied: Iterable[tuple[int, int]],
    rng: np.random.Generator,
) -> tuple[int, int] | None:
    """Pick a uniformly random free interior cell.

    Samples directly from the set of interior cells minus *occupied*, so
    the call always terminates. Returns ``None`` when the interior is
    completely occupied.
    """
    ys, xs = np.nonzero(interior_mask(width, height, occupied))
    if xs.size == 0:
        return None
    idx = int(rng.integers(xs.size))
    return int(xs[idx]), int(ys[idx])
