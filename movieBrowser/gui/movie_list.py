from __future__ import annotations
from PySide6.QtCore    import Qt, Signal # type: ignore
from PySide6.QtWidgets import QWidget, QScrollArea, QGridLayout, QFrame # type: ignore

from ..settings import CARD_WIDTH, GRID_SPACING
from ..utils    import log_debug
from ..metadata.core.models      import MovieRecord
from ..metadata.core.normalizers import card_key
from .movie_card import MovieCard


class MovieGrid(QScrollArea):
    """Scrollable grid with one MovieCard per record, in list order."""
    movie_clicked = Signal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.NoFrame)

        container = QWidget()
        self.grid_layout = QGridLayout(container)
        self.grid_layout.setContentsMargins(GRID_SPACING, GRID_SPACING, GRID_SPACING, GRID_SPACING)
        self.grid_layout.setSpacing(GRID_SPACING)
        self.grid_layout.setAlignment(Qt.AlignTop | Qt.AlignHCenter)
        self.setWidget(container)

        self._cards: list[MovieCard] = []
        self._cols = 0

    # ------------------------------------------------------------------
    def cards(self) -> list[MovieCard]:
        return list(self._cards)

    def set_movies(self, movies: list[MovieRecord]) -> None:
        for card in self._cards:
            self.grid_layout.removeWidget(card)
            card.deleteLater()
        self._cards = []

        seen: set[str] = set()
        for movie in movies:
            key = card_key(movie)
            if key in seen:
                log_debug(f"duplicate card key {key!r}")
            seen.add(key)

            card = MovieCard(movie, self.widget())
            card.clicked.connect(self.movie_clicked)
            self._cards.append(card)

        self._cols = 0
        self._relayout()

    # ------------------------------------------------------------------
    def _columns(self) -> int:
        margins = self.grid_layout.contentsMargins()
        avail   = self.viewport().width() - margins.left() - margins.right()
        return max(1, (avail + GRID_SPACING) // (CARD_WIDTH + GRID_SPACING))

    def _relayout(self) -> None:
        cols = self._columns()
        if cols == self._cols:
            return
        self._cols = cols
        for card in self._cards:
            self.grid_layout.removeWidget(card)
        for idx, card in enumerate(self._cards):
            r, c = divmod(idx, cols)
            self.grid_layout.addWidget(card, r, c)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._relayout()
