import logging
import random
from typing import List, Optional, Tuple
from dfs_maze.core.grid import Grid
from dfs_maze.core.events import Backtrack, Done, WallRemoved
from dfs_maze.algo.base import Generator, StepResult

logger = logging.getLogger(__name__)

def step(grid: Grid, stack: List[Tuple[int, int]], rng: random.Random) -> StepResult:
    """
    One stack operation of the recursive backtracker.

    Looks at the top of 'stack'. If it has unvisited neighbors, one is picked
    uniformly with 'rng', the shared wall is carved and the neighbor is
    pushed. Otherwise the top is popped. An empty stack means the maze is
    complete.
    """
    if not stack:
        return Done()

    cr, cc = stack[-1]

    # Find unvisited neighbors
    neighbors = []
    for nr, nc, dir_bit in grid.get_neighbors(cr, cc):
        if not grid.is_visited(nr, nc):
            neighbors.append((nr, nc, dir_bit))

    if neighbors:
        nr, nc, dir_bit = rng.choice(neighbors)

        grid.set_visited(nr, nc)
        grid.carve_path(cr, cc, dir_bit)
        stack.append((nr, nc))
        return WallRemoved(cr, cc, nr, nc, dir_bit)

    # Backtrack
    stack.pop()
    return Backtrack(cr, cc)

class RecursiveBacktracker(Generator):
    def __init__(self, grid: Grid, seed: Optional[int] = None):
        super().__init__(grid, seed)
        self.rng = random.Random(seed)

        # Start at the entry (0,0)
        self.grid.set_visited(0, 0)
        self.stack: List[Tuple[int, int]] = [(0, 0)]

    def step(self) -> StepResult:
        result = step(self.grid, self.stack, self.rng)

        if isinstance(result, Done):
            if not self.finished:
                self.finished = True
                self.grid.open_boundary()
                logger.debug(f"Generation finished after {self.step_count} steps")
            return result

        self.step_count += 1
        if self.step_count % 100 == 0:
            logger.debug(f"Step {self.step_count}, stack: {len(self.stack)}")
        return result
