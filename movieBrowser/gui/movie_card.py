from __future__ import annotations
from PySide6.QtCore    import Qt, QSize, QPropertyAnimation, Signal # type: ignore
from PySide6.QtGui     import QColor # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QGridLayout, QGraphicsDropShadowEffect
)

from ..settings import (
    ACCENT_COLOR, PANEL_COLOR, CARD_WIDTH, CARD_HEIGHT,
    CARD_POSTER_PLACEHOLDER, CARD_POSTER_FALLBACK,
)
from ..metadata.core.models      import MovieRecord
from ..metadata.core.normalizers import card_key, resolve_card_label, resolve_poster
from .remote_image import RemoteImageLabel


class MovieCard(QFrame):
    """Poster tile with "Title (Year)" along the bottom edge."""
    clicked = Signal(object)        # the full MovieRecord

    def __init__(self, movie: MovieRecord, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName(f"MovieCard:{card_key(movie)}")
        self.setFixedSize(CARD_WIDTH, CARD_HEIGHT)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(f"MovieCard {{ background:{PANEL_COLOR}; border-radius:16px; }}")

        label_text = resolve_card_label(movie)

        # ── poster and title share one grid cell; title sits on top ─────
        root = QGridLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.poster = RemoteImageLabel(
            resolve_poster(movie, CARD_POSTER_PLACEHOLDER),
            CARD_POSTER_FALLBACK,
            QSize(CARD_WIDTH, CARD_HEIGHT),
            alt_text=label_text,
            parent=self,
        )
        root.addWidget(self.poster, 0, 0)

        self.title_label = QLabel(label_text, alignment=Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setFixedWidth(CARD_WIDTH)
        self.title_label.setMinimumHeight(60)
        self.title_label.setStyleSheet(
            "background: qlineargradient(x1:0, y1:1, x2:0, y2:0, "
            "stop:0 rgba(0,0,0,230), stop:1 rgba(0,0,0,0));"
            "color:#ffffff; font-size:18px; font-weight:600; padding:12px;"
        )
        root.addWidget(self.title_label, 0, 0, Qt.AlignBottom)

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setColor(QColor(ACCENT_COLOR))
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def label(self) -> str:
        return self.title_label.text()

    # ------------------------------------------------------------------
    # click: release inside the card, like a button
    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() == Qt.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit(self.movie)

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(24)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
