# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QLabel, QStackedWidget, QVBoxLayout, QFrame
)

from movieBrowser.settings import (
    ACCENT_COLOR, HEADER_COLOR, LOADING_MESSAGE, NO_MOVIES_MESSAGE,
)
from movieBrowser.utils                  import log_debug
from movieBrowser.metadata.api_clients   import MovieAPIClient
from movieBrowser.metadata.core.models   import MovieRecord
from movieBrowser.gui.controller         import MovieBrowserController, MovieBrowserState, view_mode
from movieBrowser.gui.movie_list         import MovieGrid
from movieBrowser.gui.details_dialog     import MovieDetailsModal


class MainWindow(QMainWindow):
    """
    Header, "All Movies" section and one of: status text or the card grid.
    The detail overlay is stacked on top while a movie is selected.
    """

    def __init__(self, client: MovieAPIClient | None = None, blocking_fetch: bool = False):
        super().__init__()
        self.setWindowTitle("Movie Browser")

        self.controller = MovieBrowserController(client, self)
        self._blocking_fetch = blocking_fetch
        self._mounted = False
        self._shown_movies: list[MovieRecord] | None = None
        self.modal: MovieDetailsModal | None = None

        self._build_ui()
        self.resize(1280, 800)

        self.controller.state_changed.connect(self._render)
        self.controller.modal_changed.connect(self._on_modal_changed)
        self.grid.movie_clicked.connect(self.controller.select_movie)
        self._render(self.controller.state)

    def _build_ui(self) -> None:
        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # ── header ──────────────────────────────────────────────────────
        header = QFrame()
        header.setObjectName("Header")
        header.setStyleSheet(f"#Header {{ background:{HEADER_COLOR}; }}")
        hbox = QVBoxLayout(header)
        hbox.setContentsMargins(0, 24, 0, 24)
        title = QLabel("Movie Browser", alignment=Qt.AlignCenter)
        title.setStyleSheet(f"color:{ACCENT_COLOR}; font-size:36px; font-weight:bold;")
        subtitle = QLabel("Click on any movie to see details", alignment=Qt.AlignCenter)
        subtitle.setStyleSheet("color:#d1d5db;")
        hbox.addWidget(title)
        hbox.addWidget(subtitle)
        root.addWidget(header)

        # ── section ─────────────────────────────────────────────────────
        section = QLabel("All Movies")
        section.setStyleSheet("font-size:20px; font-weight:600; margin:32px 0 0 40px;")
        root.addWidget(section)

        self.status_label = QLabel(alignment=Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        self.grid = MovieGrid()

        self.body = QStackedWidget()
        self.body.addWidget(self.status_label)
        self.body.addWidget(self.grid)
        root.addWidget(self.body, 1)

        self.setCentralWidget(central)

    # ─────────────────────────────────────────────────────────────────── Qt
    def showEvent(self, event):
        super().showEvent(event)
        if not self._mounted:
            self._mounted = True
            self.controller.load_movies(blocking=self._blocking_fetch)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.modal is not None:
            self.modal.setGeometry(self.rect())

    def closeEvent(self, event):
        self._unmount_modal()
        self.controller.shutdown()
        super().closeEvent(event)

    # ─────────────────────────────────────────────────────────────── state
    @Slot(object)
    def _render(self, state: MovieBrowserState) -> None:
        mode = view_mode(state)
        if mode == "grid":
            if state.movies is not self._shown_movies:
                self._shown_movies = state.movies
                self.grid.set_movies(state.movies)
            self.body.setCurrentWidget(self.grid)
            return

        text, color = {
            "loading": (LOADING_MESSAGE, "#ffffff"),
            "error":   (state.error, "#ef4444"),
            "empty":   (NO_MOVIES_MESSAGE, "#ffffff"),
        }[mode]
        self.status_label.setText(text)
        self.status_label.setStyleSheet(f"color:{color}; font-size:18px; padding:64px;")
        self.body.setCurrentWidget(self.status_label)

    @Slot(object)
    def _on_modal_changed(self, movie: MovieRecord | None) -> None:
        self._unmount_modal()
        if movie is None:
            return
        self.modal = MovieDetailsModal(movie, self)
        self.modal.close_requested.connect(self.controller.close_modal)
        self.modal.setGeometry(self.rect())
        self.modal.show()
        self.modal.raise_()

    def _unmount_modal(self) -> None:
        if self.modal is not None:
            log_debug("details closed")
            self.modal.unmount()
            self.modal = None

    def status_text(self) -> str:
        return self.status_label.text() if self.body.currentWidget() is self.status_label else ""
