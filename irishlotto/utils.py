import sys
import logging
from typing import Dict
from .config import THEMES

# ============================================================
# 로깅 설정
# ============================================================
def setup_logging():
    """로깅 시스템 초기화"""
    logger = logging.getLogger("IrishLotto")
    logger.setLevel(logging.DEBUG)

    # 이미 핸들러가 있으면 재사용 (중복 출력 방지)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

logger = setup_logging()

# ============================================================
# 테마 시스템
# ============================================================
class ThemeManager:
    """테마 관리자"""
    _current_theme = 'light'
    _listeners = []

    @classmethod
    def get_theme(cls) -> Dict:
        return THEMES[cls._current_theme]

    @classmethod
    def get_theme_name(cls) -> str:
        return cls._current_theme

    @classmethod
    def toggle_theme(cls):
        cls._current_theme = 'dark' if cls._current_theme == 'light' else 'light'
        logger.info(f"Theme changed to: {cls._current_theme}")
        for listener in cls._listeners:
            listener()

    @classmethod
    def add_listener(cls, callback):
        cls._listeners.append(callback)

    @classmethod
    def remove_listener(cls, callback):
        if callback in cls._listeners:
            cls._listeners.remove(callback)

    @classmethod
    def get_stylesheet(cls) -> str:
        t = cls.get_theme()

        return f"""
            /* ===== 기본 위젯 스타일 ===== */
            QWidget {{
                background-color: {t['bg_primary']};
                font-family: 'Segoe UI', sans-serif;
                color: {t['text_primary']};
            }}

            /* ===== 번호 입력 필드 ===== */
            QLineEdit {{
                border: 1px solid {t['border']};
                border-radius: 6px;
                background-color: {t['bg_secondary']};
                color: {t['text_primary']};
                font-size: 22px;
                selection-background-color: {t['accent']};
            }}
            QLineEdit:focus {{
                border: 2px solid {t['accent']};
            }}
            QLineEdit#bonusInput {{
                border: 2px solid {t['bonus_border']};
            }}

            /* ===== 버튼 ===== */
            QPushButton {{
                border-radius: 6px;
                font-size: 15px;
                font-weight: bold;
                color: #FFFFFF;
                border: none;
                padding: 8px 18px;
                background-color: {t['accent']};
            }}
            QPushButton:hover {{
                background-color: {t['accent_hover']};
            }}
            QPushButton#playBtn {{
                padding: 10px 24px;
            }}
            QPushButton:disabled {{
                background-color: {t['bg_tertiary']};
                color: {t['text_muted']};
            }}

            /* ===== 손익 라벨 ===== */
            QLabel#lossesLabel {{
                color: {t['danger']};
                font-size: 17px;
                font-weight: 600;
            }}
            QLabel#earningsLabel {{
                color: {t['success']};
                font-size: 17px;
                font-weight: 600;
            }}

            QLabel#resultLabel {{
                color: {t['text_secondary']};
                font-size: 14px;
            }}

            /* ===== 섹션 제목 ===== */
            QLabel#sectionTitle {{
                font-size: 18px;
                font-weight: bold;
            }}

            /* ===== 툴팁 ===== */
            QToolTip {{
                background-color: {t['bg_tertiary']};
                color: {t['text_primary']};
                border: 1px solid {t['border']};
                padding: 6px 10px;
                border-radius: 6px;
                font-size: 13px;
            }}

            /* ===== 다이얼로그 / 표 ===== */
            QDialog {{
                background-color: {t['bg_primary']};
            }}
            QTableWidget {{
                background-color: {t['bg_secondary']};
                border: 1px solid {t['border']};
                border-radius: 8px;
                gridline-color: {t['border_light']};
            }}
            QHeaderView::section {{
                background-color: {t['bg_tertiary']};
                color: {t['text_primary']};
                border: none;
                padding: 6px;
                font-weight: bold;
            }}
        """
