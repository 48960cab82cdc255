from __future__ import annotations
import atexit
from dataclasses import dataclass, field
from functools import partial
import logging
from typing import Any, List, Optional

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieBrowser.settings import FETCH_FAILED_MESSAGE, NO_MOVIES_IN_RESPONSE, HTTP_TIMEOUT
from movieBrowser.utils import log_debug
from movieBrowser.metadata.core.models import MovieRecord
from movieBrowser.metadata.api_clients import MovieAPIClient, MovieAPIError
from movieBrowser.metadata.api_clients.movie_client import extract_movie_list
from movieBrowser.gui.workers import _FetchWorker

# Fetch threads that outlived their controller, kept alive until they finish.
_DETACHED: set = set()


def _forget_detached(entry, *_args) -> None:
    _DETACHED.discard(entry)


@atexit.register
def _join_detached() -> None:
    for thr, _worker in list(_DETACHED):
        thr.wait()


@dataclass
class MovieBrowserState:
    """
    Everything the window renders from. Owned by the controller only.

    ``selected`` is set exactly when ``modal_open`` is true.
    """
    movies: List[MovieRecord] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None
    modal_open: bool = False
    selected: Optional[MovieRecord] = None


def view_mode(state: MovieBrowserState) -> str:
    """Which body to show: 'loading', 'error', 'empty' or 'grid' (in that precedence)."""
    if state.loading:
        return "loading"
    if state.error:
        return "error"
    if not state.movies:
        return "empty"
    return "grid"


class MovieBrowserController(QObject):
    """Holds the view state, performs the one fetch and the modal transitions."""
    state_changed = Signal(object)    # MovieBrowserState
    modal_changed = Signal(object)    # selected MovieRecord, or None when closed

    def __init__(self, client: MovieAPIClient | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self._client = client or MovieAPIClient()
        self._state = MovieBrowserState()
        self._fetch_started = False
        self._closed = False
        self._thread: QThread | None = None
        self._worker: _FetchWorker | None = None

    @property
    def state(self) -> MovieBrowserState:
        return self._state

    # ───────────────────────────── fetch ────────────────────────────────
    def load_movies(self, blocking: bool = False) -> None:
        """
        Issue the movie-list request. Only the first call does anything.

        With *blocking* the request runs inline on the calling thread;
        otherwise on a worker thread with results delivered as signals.
        """
        if self._fetch_started:
            log_debug("load_movies ignored: fetch already issued")
            return
        self._fetch_started = True

        self._state.loading = True
        self._state.error = None
        self.state_changed.emit(self._state)

        if blocking:
            try:
                payload = self._client.fetch_page()
            except MovieAPIError as exc:
                self._on_failed(str(exc))
            else:
                self._on_loaded(payload)
            finally:
                self._on_finished()
            return

        thr    = QThread(self)
        worker = _FetchWorker(self._client)
        worker.moveToThread(thr)

        worker.loaded.connect(self._on_loaded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(self._on_finished)
        worker.finished.connect(thr.quit)
        worker.finished.connect(worker.deleteLater)
        thr.finished.connect(self._forget_worker)

        thr.started.connect(worker.run)
        self._thread, self._worker = thr, worker
        thr.start()

    @Slot(object)
    def _on_loaded(self, payload: Any) -> None:
        if self._closed:
            return
        movies = extract_movie_list(payload)
        if movies is None:
            log_debug("API response has no 'data' list", logging.WARNING)
            self._state.movies = []
            self._state.error = NO_MOVIES_IN_RESPONSE
            return
        self._state.movies = [MovieRecord.from_api(m) for m in movies]
        self._state.error = None

    @Slot(str)
    def _on_failed(self, message: str) -> None:
        if self._closed:
            return
        log_debug(f"Error fetching movies: {message}", logging.ERROR)
        self._state.error = FETCH_FAILED_MESSAGE

    @Slot()
    def _on_finished(self) -> None:
        if self._closed:
            return
        self._state.loading = False
        self.state_changed.emit(self._state)

    @Slot()
    def _forget_worker(self) -> None:
        self._worker = None

    def shutdown(self) -> None:
        """Stop reacting to the in-flight request and wait briefly for its thread."""
        self._closed = True
        if self._thread is not None and self._thread.isRunning():
            self._thread.quit()
            timeout = getattr(self._client, "timeout", HTTP_TIMEOUT)
            if not self._thread.wait(int(timeout * 1000)):
                log_debug("fetch thread still running at shutdown", logging.WARNING)
                self._detach_thread()

    def _detach_thread(self) -> None:
        """
        Hand a still-running fetch thread over to the module so destroying
        the controller (and its window) never destroys a live QThread.
        """
        thr, worker = self._thread, self._worker
        thr.setParent(None)
        entry = (thr, worker)
        _DETACHED.add(entry)
        thr.finished.connect(thr.deleteLater)
        thr.destroyed.connect(partial(_forget_detached, entry))
        self._thread = self._worker = None

    # ───────────────────────────── modal ────────────────────────────────
    def select_movie(self, record: MovieRecord) -> None:
        """Open the detail overlay for *record*."""
        if self._state.modal_open and self._state.selected is record:
            return
        self._state.selected = record
        self._state.modal_open = True
        self.modal_changed.emit(record)

    def close_modal(self) -> None:
        if not self._state.modal_open:
            return
        self._state.modal_open = False
        self._state.selected = None
        self.modal_changed.emit(None)
