"""Game-wide settings."""

MAX_SEARCH_DEPTH = 3
"""Number of recent moves remembered by a board and therefore undoable."""

SEARCH_ALGORITHM = 2
"""Bot search strategy: 1 depth-first, 2 breadth-first, 3 heuristic."""

FIELD_SIZE = 9
"""Side length of the default playing field."""