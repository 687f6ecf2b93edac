from typing import Dict, Sequence
from PyQt6.QtWidgets import QWidget, QLabel, QHBoxLayout
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from irishlotto.utils import ThemeManager
from irishlotto.config import BALL_COLORS
from irishlotto.core.engine import DrawResult

# ============================================================
# 로또 공 위젯
# ============================================================
class LottoBall(QLabel):
    """개별 번호를 원형 공 모양으로 표시하는 위젯"""

    def __init__(self, number: int, size: int = 40, highlighted: bool = False,
                 is_bonus: bool = False):
        super().__init__(str(number))
        self.number = number
        self._size = size
        self._highlighted = highlighted
        self._is_bonus = is_bonus
        self.setFixedSize(size, size)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)

        font_size = max(10, size // 3)
        self.setFont(QFont('Segoe UI', font_size, QFont.Weight.Bold))
        self.update_style()

    def get_color_info(self) -> Dict:
        """번호 대역별 색상 정보 반환"""
        if self._is_bonus:
            return BALL_COLORS['bonus']
        if self.number <= 10:
            return BALL_COLORS['1-10']
        elif self.number <= 20:
            return BALL_COLORS['11-20']
        elif self.number <= 30:
            return BALL_COLORS['21-30']
        elif self.number <= 40:
            return BALL_COLORS['31-40']
        else:
            return BALL_COLORS['41-47']

    def update_style(self):
        colors = self.get_color_info()
        bg = colors['bg']
        gradient = colors['gradient']

        # 일치 번호는 금색 테두리
        border = "3px solid #FFD700" if self._highlighted else f"1px solid {self._darken_color(bg, 20)}"
        self.setStyleSheet(f"""
            QLabel {{
                background: qradialgradient(cx:0.35, cy:0.25, radius:0.9, fx:0.25, fy:0.15,
                    stop:0 {gradient}, stop:0.5 {bg}, stop:1 {self._darken_color(bg, 15)});
                color: {colors['text']};
                border-radius: {self._size // 2}px;
                border: {border};
            }}
        """)

    def _darken_color(self, hex_color: str, percent: int) -> str:
        """색상을 어둡게 만드는 헬퍼 함수"""
        hex_color = hex_color.lstrip('#')
        r = max(0, int(hex_color[0:2], 16) - percent * 255 // 100)
        g = max(0, int(hex_color[2:4], 16) - percent * 255 // 100)
        b = max(0, int(hex_color[4:6], 16) - percent * 255 // 100)
        return f'#{r:02x}{g:02x}{b:02x}'

    def is_highlighted(self) -> bool:
        return self._highlighted


# ============================================================
# 추첨 결과 행 위젯
# ============================================================
class DrawRow(QWidget):
    """본번호 6개 + 보너스 공 한 줄"""

    def __init__(self, result: DrawResult, ball_size: int = 40,
                 matched_numbers: Sequence[int] = (), bonus_matched: bool = False):
        super().__init__()
        self.result = result

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 2, 0, 2)
        layout.setSpacing(6)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.balls = []
        for num in result.main_numbers:
            ball = LottoBall(num, size=ball_size, highlighted=num in matched_numbers)
            self.balls.append(ball)
            layout.addWidget(ball)

        self.bonus_ball = LottoBall(result.bonus_number, size=ball_size,
                                    highlighted=bonus_matched, is_bonus=True)
        layout.addWidget(self.bonus_ball)

        t = ThemeManager.get_theme()
        self.setStyleSheet(f"background: transparent; color: {t['text_primary']};")
