from backend.models.board import (
    EMPTY,
    Direction,
    find_empty_index,
    is_adjacent,
    is_solved,
    is_tile_correct,
    neighbor_in_direction,
    neighbors,
    row_col,
    solved_tiles,
    swap,
    validate_tiles,
)

__all__ = [
    "EMPTY",
    "Direction",
    "find_empty_index",
    "is_adjacent",
    "is_solved",
    "is_tile_correct",
    "neighbor_in_direction",
    "neighbors",
    "row_col",
    "solved_tiles",
    "swap",
    "validate_tiles",
]
