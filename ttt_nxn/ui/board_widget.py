from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..game_logic import EMPTY

# one color per player id, cycled when there are more players
PLAYER_COLORS = ["#8acaff", "#ff8a8a", "#9cff8a", "#ffd98a", "#d18aff", "#8affe9"]


def player_color(player):
    return QColor(PLAYER_COLORS[(player - 1) % len(PLAYER_COLORS)])


class BoardWidget(QWidget):
    """
    custom widget to draw and click on an NxN board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only use of game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling
        self.winner = None              # player id to highlight

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        ox, oy, side = self._geometry()
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        if cell <= 0:
            return None
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, player ids, and the winner if any
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        offset_x, offset_y, side = self._geometry()
        painter.fillRect(self.rect(), QColor("#333"))
        size = self.game_logic.board_size
        cell_size = side / size
        # grid lines
        painter.setPen(QPen(QColor("#555"), 2))
        for i in range(1, size):
            x = offset_x + i * cell_size
            painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
            y = offset_y + i * cell_size
            painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))
        # marks
        painter.setFont(QFont("Arial", max(6, int(cell_size * 0.4)), QFont.Bold))
        for r, row in enumerate(self.game_logic.board):
            for c, player in enumerate(row):
                if player == EMPTY:
                    continue
                rect = QRectF(offset_x + c * cell_size, offset_y + r * cell_size,
                              cell_size, cell_size)
                painter.setPen(QPen(player_color(player), 4))
                painter.drawText(rect, Qt.AlignCenter, str(player))
        if self.winner:
            painter.setFont(QFont("Arial", max(6, int(side * 0.5)), QFont.Bold))
            painter.setPen(QPen(player_color(self.winner), 10))
            painter.drawText(QRectF(offset_x, offset_y, side, side),
                             Qt.AlignCenter, str(self.winner))
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is not None:
            self.cell_clicked.emit(*cell)  # notify main window
