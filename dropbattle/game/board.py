# FILE: game/board.py

import logging
from contextlib import contextmanager

import numpy as np

from dropbattle.constants import (
    COLUMN_COUNT,
    DIRECTIONS,
    EMPTY,
    RED_TEAM,
    ROW_COUNT,
    TEAM_SYMBOLS,
    WINDOW_LENGTH,
    YEL_TEAM,
)

logger = logging.getLogger(__name__)


class InvalidMoveError(Exception):
    """Exception raised when a piece is placed somewhere gravity does not allow."""
    pass


class Board:
    """
    Gravity-drop grid. Row 0 is the TOP of the board, row ``rows - 1`` the bottom.
    Cells hold EMPTY, RED_TEAM or YEL_TEAM.
    """

    def __init__(self, rows=ROW_COUNT, columns=COLUMN_COUNT):
        self.rows = rows
        self.columns = columns
        self.grid = np.zeros((rows, columns), dtype=np.int8)

    @classmethod
    def from_rows(cls, lines):
        """
        Builds a board from text rows, top row first, using 'R', 'Y' and '.'.
        Whitespace inside a row is ignored.

        :param lines: Iterable of strings, or one multi-line string.
        :return: Board holding the described position.
        """
        if isinstance(lines, str):
            lines = lines.strip().splitlines()
        symbols = {symbol: team for team, symbol in TEAM_SYMBOLS.items()}
        parsed = []
        for line in lines:
            cells = [c for c in line if not c.isspace()]
            if not cells:
                continue
            try:
                parsed.append([symbols[c.upper()] for c in cells])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in row {line!r}.") from None
        if not parsed or len({len(row) for row in parsed}) != 1:
            raise ValueError("Board rows must be non-empty and of equal length.")

        board = cls(len(parsed), len(parsed[0]))
        board.grid = np.array(parsed, dtype=np.int8)
        if not board.is_settled():
            raise ValueError(f"Position has floating pieces:\n{board.to_string()}")
        return board

    def copy(self):
        duplicate = Board(self.rows, self.columns)
        duplicate.grid = self.grid.copy()
        return duplicate

    def is_valid_move(self, column):
        """A column is playable iff it is on the board and its top cell is empty."""
        if column < 0 or column >= self.columns:
            return False
        return self.grid[0][column] == EMPTY

    def valid_moves(self):
        return [col for col in range(self.columns) if self.is_valid_move(col)]

    def drop_row(self, column):
        """Lowest empty row in the column, or None when the column is full or off the board."""
        if column < 0 or column >= self.columns:
            return None
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][column] == EMPTY:
                return r
        return None

    def place(self, row, column, team):
        if team not in (RED_TEAM, YEL_TEAM):
            raise InvalidMoveError(f"Invalid team: {team}. Must be {RED_TEAM} or {YEL_TEAM}.")
        if row is None or row != self.drop_row(column):
            raise InvalidMoveError(f"Cell ({row}, {column}) is not the drop row of column {column}.")
        self.grid[row][column] = team

    def clear(self, row, column):
        self.grid[row][column] = EMPTY

    @contextmanager
    def dropped(self, column, team):
        """
        Drops a piece for the duration of the block and removes it on the way out,
        however the block is left.

        :yield: Row the piece landed in.
        """
        row = self.drop_row(column)
        self.place(row, column, team)
        try:
            yield row
        finally:
            self.clear(row, column)

    def window_counts(self, team):
        """
        For every anchor cell and direction, counts the team's pieces among the
        four cells starting at the anchor. Off-board cells count as nothing.

        :return: Tuple (mask, counts); mask is the (rows, columns) 0/1 occupancy
                 of ``team`` and counts has shape (len(DIRECTIONS), rows, columns).
        """
        mask = (self.grid == team).astype(np.int16)
        pad = WINDOW_LENGTH - 1
        padded = np.pad(mask, pad)
        counts = np.zeros((len(DIRECTIONS), self.rows, self.columns), dtype=np.int16)
        for d, (dr, dc) in enumerate(DIRECTIONS):
            for i in range(WINDOW_LENGTH):
                r0 = pad + i * dr
                c0 = pad + i * dc
                counts[d] += padded[r0:r0 + self.rows, c0:c0 + self.columns]
        return mask, counts

    def has_line(self, team):
        """True iff the team holds four in a row horizontally, vertically or diagonally."""
        mask, counts = self.window_counts(team)
        return bool(np.any((counts == WINDOW_LENGTH) & (mask == 1)))

    def is_full(self):
        return not np.any(self.grid[0] == EMPTY)

    def is_settled(self):
        """Gravity check: no empty cell sits beneath an occupied one in any column."""
        occupied = self.grid != EMPTY
        # once a column turns occupied going down it must stay occupied
        return bool(np.all(occupied[:-1] <= occupied[1:]))

    def to_string(self):
        """Return string representation of board, top row first."""
        return '\n'.join(' '.join(TEAM_SYMBOLS[int(cell)] for cell in row) for row in self.grid)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Board({self.rows}x{self.columns})"
