"""Binary-grid boundary tracing and region suppression.

Grids are (height, width) boolean arrays, True = foreground. Pixel
coordinates are (x, y) with y growing downward.
"""

from __future__ import annotations

import logging
from collections import deque

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# 8-neighbour ring, clockwise from north: N, NE, E, SE, S, SW, W, NW
_MOORE_RING: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

# 4-neighbourhood for flood fill: N, E, S, W
_VON_NEUMANN: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

# Upper bound on trace steps per pixel: one visit per (pixel, came-from) state.
DEFAULT_MAX_STEPS_FACTOR = 8


def moore_trace(
    grid: NDArray[np.bool_],
    start: tuple[int, int],
    max_steps: int | None = None,
) -> NDArray[np.int64]:
    """Moore-Neighbor boundary walk from ``start``.

    ``start`` must be the first foreground pixel of its component in
    row-major order, so its west neighbour is background. Returns an Nx2
    array of (x, y); the start pixel comes first and is not repeated at the
    end. Out-of-bounds neighbours count as background.
    """
    height, width = grid.shape
    sx, sy = start
    if max_steps is None:
        max_steps = DEFAULT_MAX_STEPS_FACTOR * width * height

    contour: list[tuple[int, int]] = [(sx, sy)]
    cx, cy = sx, sy
    back = (-1, 0)  # came-from, relative to the current pixel

    for _ in range(max_steps):
        from_idx = _MOORE_RING.index(back)
        nxt: tuple[int, int] | None = None
        for k in range(1, 9):
            dx, dy = _MOORE_RING[(from_idx + k) % 8]
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < width and 0 <= ny < height and grid[ny, nx]:
                nxt = (nx, ny)
                break

        if nxt is None:
            # Isolated pixel: nothing to walk to
            break

        back = (cx - nxt[0], cy - nxt[1])
        cx, cy = nxt
        if (cx, cy) == (sx, sy):
            break
        contour.append((cx, cy))
    else:
        logger.debug("Trace from (%d, %d) hit step cap %d", sx, sy, max_steps)

    return np.array(contour, dtype=np.int64)


def flood_clear(grid: NDArray[np.bool_], start: tuple[int, int]) -> int:
    """4-connected BFS from ``start`` setting every reached pixel to background.

    Mutates ``grid`` in place. Returns the number of pixels cleared.
    """
    height, width = grid.shape
    sx, sy = start
    if not grid[sy, sx]:
        return 0

    grid[sy, sx] = False
    cleared = 1
    queue: deque[tuple[int, int]] = deque([(sx, sy)])

    while queue:
        x, y = queue.popleft()
        for dx, dy in _VON_NEUMANN:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and grid[ny, nx]:
                grid[ny, nx] = False
                cleared += 1
                queue.append((nx, ny))

    return cleared


def trace_components(
    grid: NDArray[np.bool_],
    max_steps_factor: int = DEFAULT_MAX_STEPS_FACTOR,
) -> list[NDArray[np.int64]]:
    """One boundary contour per foreground component, in raster-scan order.

    Each component is traced, then erased by flood fill so the scan never
    re-enters it. ``grid`` is consumed: it is all background on return.
    A grid without any background pixel has no boundary and yields nothing.
    """
    if grid.size == 0 or grid.all():
        return []

    height, width = grid.shape
    max_steps = max_steps_factor * width * height
    contours: list[NDArray[np.int64]] = []

    # Row-major seed order; pixels erased by an earlier fill are skipped
    for flat in np.flatnonzero(grid):
        y, x = divmod(int(flat), width)
        if not grid[y, x]:
            continue
        contours.append(moore_trace(grid, (x, y), max_steps=max_steps))
        flood_clear(grid, (x, y))

    return contours
