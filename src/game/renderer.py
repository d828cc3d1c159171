"""
Frame renderer for the terminal front end.

Draws a bordered grid with box-drawing characters from read-only board
state. The renderer only writes to the stream it is given; flushing is
left to the caller.
"""
from typing import List, Optional, TextIO, Tuple

from .board import Board
from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

UL, UR, DL, DR = "┏", "┓", "┗", "┛"
LT, RT, UT, DT = "┣", "┫", "┳", "┻"
HL, VL, QD = "━", "┃", "╋"

MINE_GLYPH = "✻"
FLAG_GLYPH = "⚑"
COVERED_GLYPH = "■"

RESET = "\x1b[0m"
BORDER = "\x1b[90m"
REVERSE = "\x1b[7m"

NUMBER_COLORS = {
    1: "\x1b[94m",
    2: "\x1b[32m",
    3: "\x1b[91m",
    4: "\x1b[35m",
    5: "\x1b[33m",
    6: "\x1b[96m",
    7: "\x1b[30m",
    8: "\x1b[90m",
}
MINE_COLOR = "\x1b[91;1m"
FLAG_COLOR = "\x1b[33m"


# ============================================================================
# Frame Renderer
# ============================================================================

class FrameRenderer:
    """
    Renders a board as a box-drawn text frame.

    Each cell is three characters wide and separated from its
    neighbors by border lines, so a frame for an R x C board is
    2R + 1 lines tall and 4C + 1 characters wide (ignoring ANSI codes).
    """

    def __init__(self, color: bool = True, newline: str = "\n") -> None:
        """
        Initialize the renderer.

        Args:
            color: Emit ANSI colour codes.
            newline: Line terminator; raw-mode terminals need "\\n\\r".
        """
        self.color = color
        self.newline = newline

    def draw(
        self,
        board: Board,
        stream: TextIO,
        cursor: Optional[Tuple[int, int]] = None,
    ) -> None:
        """
        Write one complete frame to the stream.

        Args:
            board: Board to draw.
            stream: Writable text sink.
            cursor: Optional (row, col) to highlight.
        """
        stream.write(self.newline.join(self.frame_lines(board, cursor)))

    def render(
        self, board: Board, cursor: Optional[Tuple[int, int]] = None
    ) -> str:
        """Return the frame as a single string."""
        return self.newline.join(self.frame_lines(board, cursor))

    def frame_lines(
        self, board: Board, cursor: Optional[Tuple[int, int]] = None
    ) -> List[str]:
        """Build the frame one text line at a time."""
        lines = [self._border(UL, UT, UR, board.columns)]
        for row in range(board.rows):
            cells = [
                self._cell_text(board[row, col], (row, col) == cursor)
                for col in range(board.columns)
            ]
            separator = self._paint(BORDER, VL)
            lines.append(separator + separator.join(cells) + separator)
            if row < board.rows - 1:
                lines.append(self._border(LT, QD, RT, board.columns))
        lines.append(self._border(DL, DT, DR, board.columns))
        return lines

    def render_status(self, board: Board) -> str:
        """Status line shown under the grid."""
        return f"{board.flags_left} flags left"

    def _border(self, left: str, middle: str, right: str, columns: int) -> str:
        return self._paint(BORDER, left + middle.join([HL * 3] * columns) + right)

    def _cell_text(self, cell: Cell, highlighted: bool) -> str:
        text = f" {self.glyph(cell)} "
        if not highlighted:
            return text
        if self.color:
            return REVERSE + text.replace(RESET, RESET + REVERSE) + RESET
        return f"[{text[1:-1]}]"

    def glyph(self, cell: Cell) -> str:
        """Single-character glyph for a cell, coloured if enabled."""
        if cell.opened:
            if cell.is_mine:
                return self._paint(MINE_COLOR, MINE_GLYPH)
            if cell.content == 0:
                return " "
            return self._paint(NUMBER_COLORS[cell.content], str(cell.content))
        if cell.flagged:
            return self._paint(FLAG_COLOR, FLAG_GLYPH)
        return COVERED_GLYPH

    def _paint(self, code: str, text: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"
