from typing import List, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QApplication
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QCloseEvent

from irishlotto.config import APP_CONFIG, GAME_RULES
from irishlotto.utils import logger, ThemeManager
from irishlotto.core.engine import DrawEngine
from irishlotto.core.session import SessionState, PlayRecord, play
from irishlotto.ui.widgets import DrawRow
from irishlotto.ui.dialogs import PrizeTableDialog

# ============================================================
# 메인 애플리케이션 클래스
# ============================================================
class LottoApp(QWidget):
    def __init__(self, engine: Optional[DrawEngine] = None):
        super().__init__()
        self.engine = engine or DrawEngine()

        # 화면은 이 두 값으로만 다시 그린다
        self.session_state = SessionState()
        self.last_play: Optional[PlayRecord] = None

        # 창이 닫히지 않고 파괴되는 경우에도 리스너 해제
        listener = self._on_theme_changed
        ThemeManager.add_listener(listener)
        self.destroyed.connect(lambda: ThemeManager.remove_listener(listener))

        self.initUI()
        self._setup_shortcuts()
        self._render()
        logger.info("Application started")

    def initUI(self):
        self.setWindowTitle(f"{APP_CONFIG['APP_NAME']} v{APP_CONFIG['VERSION']}")
        self.setGeometry(100, 100, *APP_CONFIG['WINDOW_SIZE'])

        main_layout = QVBoxLayout()
        main_layout.setSpacing(14)
        main_layout.setContentsMargins(24, 24, 24, 24)

        # 1. 헤더 영역 (제목 + 당첨금표 + 테마 토글)
        header_layout = QHBoxLayout()

        title_label = QLabel(f"{APP_CONFIG['APP_NAME']} 🎰")
        title_label.setFont(QFont('Segoe UI', 26, QFont.Weight.Bold))
        header_layout.addWidget(title_label)
        header_layout.addStretch()

        self.prize_btn = QPushButton("Prizes")
        self.prize_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.prize_btn.clicked.connect(self._show_prize_table)
        header_layout.addWidget(self.prize_btn)

        self.theme_btn = QPushButton("Dark")
        self.theme_btn.setFixedWidth(70)
        self.theme_btn.setCheckable(True)
        self.theme_btn.clicked.connect(self._toggle_theme)
        header_layout.addWidget(self.theme_btn)

        main_layout.addLayout(header_layout)

        # 2. 번호 입력 (본번호 6칸 + 보너스 1칸)
        inputs_layout = QHBoxLayout()
        inputs_layout.setSpacing(10)
        inputs_layout.addStretch()

        self.number_inputs: List[QLineEdit] = []
        for i in range(GAME_RULES['MAIN_COUNT']):
            edit = self._make_input()
            edit.setToolTip(f"Number {i + 1}")
            self.number_inputs.append(edit)
            inputs_layout.addWidget(edit)

        self.bonus_input = self._make_input()
        self.bonus_input.setObjectName("bonusInput")
        self.bonus_input.setToolTip("Bonus number")
        inputs_layout.addWidget(self.bonus_input)

        inputs_layout.addStretch()
        main_layout.addLayout(inputs_layout)

        # 3. 플레이 버튼
        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self.play_btn = QPushButton("Play Lotto")
        self.play_btn.setObjectName("playBtn")
        self.play_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.play_btn.clicked.connect(self.play_lotto)
        btn_layout.addWidget(self.play_btn)
        btn_layout.addStretch()
        main_layout.addLayout(btn_layout)

        # 4. 추첨 결과
        self.drawn_widget = QWidget()
        drawn_layout = QVBoxLayout(self.drawn_widget)
        drawn_layout.setContentsMargins(0, 0, 0, 0)
        drawn_layout.setSpacing(6)

        drawn_title = QLabel("Drawn Numbers:")
        drawn_title.setObjectName("sectionTitle")
        drawn_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        drawn_layout.addWidget(drawn_title)

        self.drawn_row_layout = QVBoxLayout()
        self.drawn_row_layout.setContentsMargins(0, 0, 0, 0)
        drawn_layout.addLayout(self.drawn_row_layout)

        result_layout = QHBoxLayout()
        result_layout.addStretch()
        self.result_label = QLabel()
        self.result_label.setObjectName("resultLabel")
        result_layout.addWidget(self.result_label)
        self.copy_btn = QPushButton("📋")
        self.copy_btn.setFixedSize(32, 28)
        self.copy_btn.setToolTip("Copy drawn numbers")
        self.copy_btn.clicked.connect(self._copy_latest)
        result_layout.addWidget(self.copy_btn)
        result_layout.addStretch()
        drawn_layout.addLayout(result_layout)

        main_layout.addWidget(self.drawn_widget)

        # 5. 손실 / 수익
        totals_layout = QHBoxLayout()
        totals_layout.addStretch()
        self.losses_label = QLabel()
        self.losses_label.setObjectName("lossesLabel")
        totals_layout.addWidget(self.losses_label)
        totals_layout.addSpacing(40)
        self.earnings_label = QLabel()
        self.earnings_label.setObjectName("earningsLabel")
        totals_layout.addWidget(self.earnings_label)
        totals_layout.addStretch()
        main_layout.addLayout(totals_layout)

        # 6. 히스토리
        self.history_widget = QWidget()
        history_layout = QVBoxLayout(self.history_widget)
        history_layout.setContentsMargins(0, 12, 0, 0)
        history_layout.setSpacing(4)

        history_title = QLabel(f"History (Last {GAME_RULES['MAX_HISTORY']} Draws)")
        history_title.setObjectName("sectionTitle")
        history_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        history_layout.addWidget(history_title)

        self.history_rows_layout = QVBoxLayout()
        self.history_rows_layout.setContentsMargins(0, 0, 0, 0)
        history_layout.addLayout(self.history_rows_layout)

        main_layout.addWidget(self.history_widget)
        main_layout.addStretch()

        self.setLayout(main_layout)
        self._apply_theme()

    def _make_input(self) -> QLineEdit:
        edit = QLineEdit()
        edit.setFixedSize(56, 56)
        edit.setMaxLength(3)
        edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return edit

    def _setup_shortcuts(self):
        """단축키 설정"""
        self.play_btn.setShortcut("Return")

    def _toggle_theme(self):
        ThemeManager.toggle_theme()

    def _on_theme_changed(self):
        self._apply_theme()
        self._render()

    def _apply_theme(self):
        is_dark = ThemeManager.get_theme_name() == 'dark'
        self.theme_btn.setText("Light" if is_dark else "Dark")
        self.theme_btn.setChecked(is_dark)
        self.setStyleSheet(ThemeManager.get_stylesheet())

    # === 플레이 ===

    def get_raw_numbers(self) -> List[str]:
        return [edit.text() for edit in self.number_inputs]

    def play_lotto(self):
        """Play 버튼 처리: 입력이 유효하지 않으면 아무 것도 바꾸지 않는다"""
        state, record = play(
            self.session_state,
            self.get_raw_numbers(),
            self.bonus_input.text(),
            self.engine,
        )
        if record is None:
            return

        self.session_state = state
        self.last_play = record
        self._render()

    # === 렌더링 ===

    def _render(self):
        currency = APP_CONFIG['CURRENCY']
        state = self.session_state

        self.losses_label.setText(f"Losses: {currency}{state.total_losses:,}")
        self.earnings_label.setText(f"Earnings: {currency}{state.total_earnings:,}")

        self._render_latest()
        self._render_history()

    def _render_latest(self):
        self._clear_layout(self.drawn_row_layout)

        if self.last_play is None:
            self.drawn_widget.setVisible(False)
            return

        outcome = self.last_play.outcome
        row = DrawRow(self.last_play.result, ball_size=42,
                      matched_numbers=outcome.matched_numbers,
                      bonus_matched=outcome.bonus_matched)
        self.drawn_row_layout.addWidget(row)

        bonus_text = " + bonus" if outcome.bonus_matched else ""
        if outcome.is_winner:
            prize_text = f"You won {APP_CONFIG['CURRENCY']}{outcome.prize:,}!"
        else:
            prize_text = "No prize"
        self.result_label.setText(f"{outcome.match_count} matched{bonus_text} · {prize_text}")
        self.drawn_widget.setVisible(True)

    def _render_history(self):
        self._clear_layout(self.history_rows_layout)

        history = self.session_state.history
        for result in history:
            self.history_rows_layout.addWidget(DrawRow(result, ball_size=32))
        self.history_widget.setVisible(bool(history))

    def _clear_layout(self, layout):
        while layout.count():
            child = layout.takeAt(0)
            if child.widget():
                child.widget().deleteLater()

    def _copy_latest(self):
        """최근 추첨 번호를 클립보드에 복사"""
        if self.last_play is None:
            return
        result = self.last_play.result
        text = " ".join(f"{n:02d}" for n in result.main_numbers) + f" + {result.bonus_number:02d}"
        QApplication.clipboard().setText(text)

    def _show_prize_table(self):
        dialog = PrizeTableDialog(self)
        dialog.exec()

    def closeEvent(self, event: QCloseEvent):
        ThemeManager.remove_listener(self._on_theme_changed)
        event.accept()
