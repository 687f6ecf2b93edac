import sys
import traceback
from PyQt6.QtWidgets import QApplication, QMessageBox
from PyQt6.QtGui import QFont
from .config import APP_CONFIG
from .utils import logger
from .ui.main_window import LottoApp

def exception_hook(exctype, value, traceback_obj):
    """글로벌 예외 처리"""
    traceback_str = ''.join(traceback.format_tb(traceback_obj))
    logger.critical(f"Uncaught exception:\n{exctype.__name__}: {value}\n\n{traceback_str}")

    # GUI가 살아있다면 에러 메시지 표시
    if QApplication.instance():
        QMessageBox.critical(None, "Fatal error",
                             f"An unexpected error occurred.\n\n{exctype.__name__}: {value}")

    sys.__excepthook__(exctype, value, traceback_obj)

def main():
    """애플리케이션 진입점"""
    sys.excepthook = exception_hook

    app = QApplication(sys.argv)
    app.setApplicationName(APP_CONFIG['APP_NAME'])
    app.setApplicationVersion(APP_CONFIG['VERSION'])
    app.setFont(QFont("Segoe UI", 10))

    logger.info(f"Starting {APP_CONFIG['APP_NAME']} v{APP_CONFIG['VERSION']}")

    window = LottoApp()
    window.show()

    sys.exit(app.exec())

if __name__ == '__main__':
    main()
