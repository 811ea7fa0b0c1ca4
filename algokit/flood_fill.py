"""Four-directional flood fill on a grid of integers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def flood_fill(
    grid: Sequence[MutableSequence[int]], x: int, y: int, replacement: int
) -> int:
    """Recolour the region connected to ``grid[x][y]`` in place.

    Cells join the region when they share an edge and the starting colour.
    Returns the number of cells changed; a start outside the grid or a
    replacement equal to the starting colour changes nothing.
    """
    rows = len(grid)

    def inside(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < len(grid[r])

    if not inside(x, y):
        return 0
    target = grid[x][y]
    if target == replacement:
        return 0

    changed = 0
    stack = [(x, y)]
    while stack:
        r, c = stack.pop()
        if not inside(r, c) or grid[r][c] != target:
            continue
        grid[r][c] = replacement
        changed += 1
        # Pushed in reverse so that up, right, down, left are explored in order.
        stack.extend([(r, c - 1), (r + 1, c), (r, c + 1), (r - 1, c)])
    return changed


def render_grid(grid: Sequence[Sequence[int]]) -> str:
    """Show the grid with cells separated by two spaces."""
    return "\n".join("  ".join(str(cell) for cell in row) for row in grid)