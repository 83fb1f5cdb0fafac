from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Union
from dfs_maze.core.grid import Cell, Grid
from dfs_maze.core.events import Backtrack, Done, WallRemoved

StepResult = Union[WallRemoved, Backtrack, Done]

class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None):
        self.grid = grid
        self.seed = seed
        self.step_count = 0
        self.finished = False

    @abstractmethod
    def step(self) -> StepResult:
        """
        Performs one unit of work and reports what changed.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run(self) -> Iterator[StepResult]:
        """Yields every step outcome, ending with Done."""
        while True:
            result = self.step()
            yield result
            if isinstance(result, Done):
                return

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Cell] = []
        self.visited_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        pass

    def solve(self) -> List[Cell]:
        for _ in self.run():
            pass
        return self.path
