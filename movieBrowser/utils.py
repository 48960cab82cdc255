import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap, QPainter, QFont, QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieBrowser.settings import (
    LOG_PATH, LOG_LEVEL, ACCENT_COLOR, BACKGROUND_COLOR, PANEL_COLOR,
)

_LOGGER_NAME = "movieBrowser"


def setup_logging(
    log_path: Path | None = LOG_PATH,
    level: str = LOG_LEVEL,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure the application logger: console always, rotating file when
    *log_path* is given. Safe to call more than once; handlers are replaced.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_path:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # requests' connection pool chatter
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logger


def log_debug(message: str, level: int = logging.DEBUG) -> None:
    """Write a timestamped message to the application log."""
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        setup_logging()
    logger.log(level, message)


def make_text_pixmap(
    text: str,
    width: int,
    height: int,
    fg_color: str = "#ffffff",
    bg_color: str = "#333333",
) -> QPixmap:
    """
    Create a *width* x *height* pixmap with `text` centred on a flat fill.
    Shown while a remote image is loading and kept if every source fails.
    """
    pix = QPixmap(width, height)
    pix.fill(QColor(bg_color))

    painter = QPainter(pix)
    painter.setRenderHint(QPainter.Antialiasing)

    font = QFont("Arial", max(8, int(min(width, height) * 0.12)), QFont.Bold)
    painter.setFont(font)
    painter.setPen(QColor(fg_color))
    painter.drawText(pix.rect(), Qt.AlignCenter, text)

    painter.end()
    return pix


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor(BACKGROUND_COLOR))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor(PANEL_COLOR))
    palette.setColor(QPalette.AlternateBase, QColor("#2a2a2a"))
    palette.setColor(QPalette.Button,        QColor(PANEL_COLOR))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
