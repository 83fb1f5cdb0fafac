from dataclasses import dataclass

# Outcomes of a single generator step. Renderers redraw on WallRemoved,
# Backtrack leaves walls untouched.

@dataclass(frozen=True)
class WallRemoved:
    row: int
    col: int
    neighbor_row: int
    neighbor_col: int
    direction: int


@dataclass(frozen=True)
class Backtrack:
    row: int
    col: int


@dataclass(frozen=True)
class Done:
    pass
