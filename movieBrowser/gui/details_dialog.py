"""
details_dialog
~~~~~~~~~~~~~~
Full-detail overlay for one movie.

The overlay covers its parent; the visible panel sits in the middle. It is
dismissed by the "×" control, by a mouse press outside the panel, or by
Escape anywhere in the application. The last two are one application-wide
event filter that exists from construction until ``unmount()``.
"""

from __future__ import annotations
from PySide6.QtCore    import Qt, QEvent, QObject, QSize, Signal # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QApplication, QWidget, QFrame, QLabel, QPushButton, QScrollArea,
    QVBoxLayout, QHBoxLayout, QGridLayout,
)

from movieBrowser.settings import (
    ACCENT_COLOR, PANEL_COLOR, MUTED_TEXT_COLOR, NO_CAST_MESSAGE,
    DETAIL_POSTER, DETAIL_POSTER_FALLBACK, ACTOR_PHOTO,
)
from movieBrowser.utils import log_debug
from movieBrowser.metadata.core.models      import CastMember, MovieDetails, MovieRecord
from movieBrowser.metadata.core.normalizers import build_details
from movieBrowser.gui.remote_image import RemoteImageLabel


class _DocumentListener(QObject):
    """App-wide filter: Escape, or a press outside *panel*, calls *on_dismiss*."""

    def __init__(self, panel: QWidget, on_dismiss) -> None:
        super().__init__(panel)
        self._panel = panel
        self._on_dismiss = on_dismiss
        self._app = None

    @property
    def active(self) -> bool:
        return self._app is not None

    def acquire(self) -> None:
        if self._app is None:
            self._app = QApplication.instance()
            self._app.installEventFilter(self)

    def release(self) -> None:
        if self._app is not None:
            self._app.removeEventFilter(self)
            self._app = None

    # ------------------------------------------------------------------ Qt
    def eventFilter(self, obj, ev):
        if self._app is None:
            return False
        kind = ev.type()
        if kind == QEvent.Type.MouseButtonPress:
            pos = self._panel.mapFromGlobal(ev.globalPosition().toPoint())
            if not self._panel.rect().contains(pos):
                self._on_dismiss()
        elif kind == QEvent.Type.KeyPress and ev.key() == Qt.Key_Escape:
            self._on_dismiss()
        return False


class MovieDetailsModal(QWidget):
    close_requested = Signal()

    def __init__(self, movie: MovieRecord, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.movie   = movie
        self.details = build_details(movie)

        self.setObjectName("MovieDetailsOverlay")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("#MovieDetailsOverlay { background: rgba(0, 0, 0, 230); }")

        self._build_ui()

        self._listener = _DocumentListener(self.panel, self.close_requested.emit)
        self._listener.acquire()
        log_debug(f"details opened: {self.details.heading}")

    # ------------------------------------------------------------------
    @property
    def listening(self) -> bool:
        return self._listener.active

    def unmount(self) -> None:
        """Drop the global listeners, then hide and schedule deletion."""
        self._listener.release()
        self.hide()
        self.deleteLater()

    # ------------------------------------------------------------------ ui
    def _build_ui(self) -> None:
        d: MovieDetails = self.details

        outer = QVBoxLayout(self)
        outer.setContentsMargins(48, 48, 48, 48)

        self.panel = QFrame(self)
        self.panel.setObjectName("ModalContent")
        self.panel.setMinimumSize(720, 520)
        self.panel.setMaximumWidth(900)
        self.panel.setStyleSheet(f"#ModalContent {{ background:{PANEL_COLOR}; border-radius:12px; }}")
        outer.addWidget(self.panel, 0, Qt.AlignCenter)

        panel_box = QGridLayout(self.panel)
        panel_box.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setStyleSheet("background: transparent;")
        panel_box.addWidget(scroll, 0, 0)

        body = QWidget()
        row  = QHBoxLayout(body)
        row.setContentsMargins(40, 40, 40, 40)
        row.setSpacing(32)
        scroll.setWidget(body)

        # ── poster ───────────────────────────────────────────────────────
        self.poster = RemoteImageLabel(
            d.poster, DETAIL_POSTER_FALLBACK, QSize(*DETAIL_POSTER), alt_text=d.title,
        )
        row.addWidget(self.poster, 0, Qt.AlignTop)

        # ── info column ─────────────────────────────────────────────────
        info = QVBoxLayout()
        self.heading = QLabel(d.heading)
        self.heading.setWordWrap(True)
        self.heading.setStyleSheet(f"color:{ACCENT_COLOR}; font-size:32px; font-weight:bold;")
        info.addWidget(self.heading)

        self.fields: dict[str, QLabel] = {}
        for key, caption, value in [
            ("director",     "Director",     d.director),
            ("rating",       "Rating",       d.rating),
            ("release_date", "Release Date", d.release_date),
            ("plot",         "Plot",         d.plot),
        ]:
            lbl = QLabel()
            lbl.setTextFormat(Qt.PlainText)
            lbl.setText(f"{caption}: {value}")
            lbl.setWordWrap(True)
            lbl.setStyleSheet("font-size:16px; margin:4px 0;")
            self.fields[key] = lbl
            info.addWidget(lbl)

        info.addSpacing(24)
        cast_title = QLabel("Cast")
        cast_title.setStyleSheet(
            f"color:{ACCENT_COLOR}; font-size:20px; border-bottom:2px solid {ACCENT_COLOR};"
        )
        info.addWidget(cast_title, 0, Qt.AlignLeft)
        info.addWidget(self._build_cast(d.cast))
        info.addStretch()
        row.addLayout(info, 2)

        # ── close control, over the top-right corner ────────────────────
        self.close_button = QPushButton("×")
        self.close_button.setObjectName("CloseButton")
        self.close_button.setFixedSize(40, 40)
        self.close_button.setCursor(Qt.PointingHandCursor)
        self.close_button.setStyleSheet(
            "#CloseButton { color:#ffffff; font-size:24px; border-radius:20px;"
            " background: rgba(0,0,0,128); }"
            f"#CloseButton:hover {{ background:{ACCENT_COLOR}; }}"
        )
        self.close_button.clicked.connect(self.close_requested.emit)
        panel_box.addWidget(self.close_button, 0, 0, Qt.AlignTop | Qt.AlignRight)

    def _build_cast(self, cast: tuple[CastMember, ...]) -> QWidget:
        box = QWidget()
        if not cast:
            lay = QVBoxLayout(box)
            lay.setContentsMargins(0, 0, 0, 0)
            self.no_cast_label = QLabel(NO_CAST_MESSAGE)
            self.no_cast_label.setStyleSheet(f"color:{MUTED_TEXT_COLOR};")
            lay.addWidget(self.no_cast_label)
            self.cast_labels: list[QLabel] = []
            return box

        self.no_cast_label = None
        self.cast_labels = []
        grid = QGridLayout(box)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(20)
        per_row = 5
        for idx, member in enumerate(cast):
            cell = QVBoxLayout()
            photo = RemoteImageLabel(
                member.photo, member.fallback_photo, QSize(*ACTOR_PHOTO), alt_text=member.name[:1],
            )
            photo.setStyleSheet(f"border:4px solid {ACCENT_COLOR}; border-radius:40px;")
            name = QLabel(member.name, alignment=Qt.AlignCenter)
            name.setWordWrap(True)
            name.setFixedWidth(96)
            name.setStyleSheet("font-size:13px;")
            cell.addWidget(photo, 0, Qt.AlignHCenter)
            cell.addWidget(name, 0, Qt.AlignHCenter)
            self.cast_labels.append(name)
            r, c = divmod(idx, per_row)
            grid.addLayout(cell, r, c)
        return box
