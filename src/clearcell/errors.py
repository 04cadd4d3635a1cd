class InvalidCoordinate(IndexError):
    """Raised when a selection falls outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"Cell ({row}, {col}) is outside the {rows}x{cols} board")
        self.row = row
        self.col = col


class InvalidGeneratorValue(ValueError):
    """Raised when a cell generator returns something other than a filled BoardCell."""
