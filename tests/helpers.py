from collections import deque

from delve.state.grid import Grid


def carve_box(grid: Grid, x1: int, y1: int, x2: int, y2: int) -> Grid:
    """Open every cell in the inclusive box (x1, y1)-(x2, y2)."""
    for y in range(y1, y2 + 1):
        for x in range(x1, x2 + 1):
            grid.carve(x, y)
    return grid


def reachable_from(grid: Grid, start):
    """Floor cells 8-connected to ``start``."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                nx, ny = x + dx, y + dy
                if (nx, ny) in seen or not grid.in_bounds(nx, ny):
                    continue
                if grid.is_blocked(nx, ny):
                    continue
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen
