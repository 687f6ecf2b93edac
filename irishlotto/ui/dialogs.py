from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
)
from PyQt6.QtCore import Qt

from irishlotto.config import APP_CONFIG, GAME_RULES, PRIZE_TABLE
from irishlotto.utils import ThemeManager

# ============================================================
# 당첨금 표 다이얼로그
# ============================================================
class PrizeTableDialog(QDialog):
    """일치 개수/보너스별 당첨금 표"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Prize Table")
        self.setMinimumSize(360, 380)
        self._setup_ui()
        self.setStyleSheet(ThemeManager.get_stylesheet())

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        t = ThemeManager.get_theme()
        currency = APP_CONFIG['CURRENCY']

        info = QLabel(
            f"Pick {GAME_RULES['MAIN_COUNT']} numbers from 1-{GAME_RULES['POOL_SIZE']} "
            f"plus a bonus. Each play costs {currency}{GAME_RULES['STAKE']}."
        )
        info.setWordWrap(True)
        info.setStyleSheet(f"color: {t['text_secondary']}; font-size: 13px;")
        layout.addWidget(info)

        self.table = QTableWidget(len(PRIZE_TABLE), 3)
        self.table.setHorizontalHeaderLabels(["Matches", "Bonus", "Prize"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)

        for row, ((match_count, bonus_matched), prize) in enumerate(PRIZE_TABLE.items()):
            cells = [str(match_count), "Yes" if bonus_matched else "No", f"{currency}{prize:,}"]
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self.table.setItem(row, col, item)

        layout.addWidget(self.table)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        btn_layout.addWidget(close_btn)
        layout.addLayout(btn_layout)
