from PySide6.QtCore import QObject, Signal, Slot

from movieBrowser.metadata.api_clients import MovieAPIClient, MovieAPIError
from movieBrowser.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _FetchWorker(QObject):
    """Runs the single movie-list request off the GUI thread."""
    loaded   = Signal(object)     # decoded JSON body
    failed   = Signal(str)        # MovieAPIError text
    finished = Signal()           # always, after loaded/failed

    def __init__(self, client: MovieAPIClient):
        super().__init__()
        self.client = client

    @Slot()
    def run(self):
        try:
            payload = self.client.fetch_page()
            self.loaded.emit(payload)
        except MovieAPIError as e:
            log_debug(f"fetch-worker error: {e}")
            self.failed.emit(str(e))
        finally:
            self.finished.emit()
