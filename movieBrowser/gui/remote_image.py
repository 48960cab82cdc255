"""
remote_image
~~~~~~~~~~~~
QLabel that shows an image fetched from a URL.

A painted placeholder is shown while loading. If the load fails (network
error or bytes that are not an image) the label switches to its fallback URL
exactly once; a failure of the fallback is left alone, so a broken fallback
can never start a reload loop.
"""

from __future__ import annotations
from functools import partial

from PySide6.QtCore    import Qt, QSize, QUrl # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest # type: ignore
from PySide6.QtWidgets import QLabel, QWidget # type: ignore

from movieBrowser.utils import log_debug, make_text_pixmap

_manager: QNetworkAccessManager | None = None


def _network() -> QNetworkAccessManager:
    """Process-wide access manager (created lazily, after QApplication)."""
    global _manager
    if _manager is None:
        _manager = QNetworkAccessManager()
    return _manager


class RemoteImageLabel(QLabel):

    def __init__(
        self,
        url: str,
        fallback_url: str,
        size: QSize,
        alt_text: str = "",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setFixedSize(size)
        self.setAlignment(Qt.AlignCenter)
        self.setToolTip(alt_text)

        self._url = url
        self._fallback_url = fallback_url
        self._handles_errors = True

        self.setPixmap(make_text_pixmap(alt_text, size.width(), size.height()))
        self._request(url)

    # ------------------------------------------------------------------
    @property
    def current_url(self) -> str:
        return self._url

    @property
    def handles_errors(self) -> bool:
        return self._handles_errors

    def load_failed(self) -> None:
        """Swap to the fallback URL; only the first failure does anything."""
        if not self._handles_errors:
            return
        self._handles_errors = False
        log_debug(f"image failed, using fallback: {self._url}")
        self._url = self._fallback_url
        self._request(self._url)

    # ------------------------------------------------------------------ net
    def _request(self, url: str) -> None:
        reply = _network().get(QNetworkRequest(QUrl(url)))
        # owned by the label: destroying the label aborts the download
        reply.setParent(self)
        reply.finished.connect(partial(self._on_reply, reply))

    def _on_reply(self, reply: QNetworkReply) -> None:
        ok   = reply.error() == QNetworkReply.NetworkError.NoError
        data = reply.readAll() if ok else None
        reply.deleteLater()

        pix = QPixmap()
        if ok and pix.loadFromData(data):
            self._show(pix)
        else:
            self.load_failed()

    def _show(self, pix: QPixmap) -> None:
        self.setPixmap(pix.scaled(
            self.size(), Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation
        ))
