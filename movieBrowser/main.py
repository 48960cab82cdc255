import sys
from PySide6.QtWidgets import QApplication

from movieBrowser.utils            import apply_dark_palette, log_debug, setup_logging
from movieBrowser.settings         import MOVIE_API_URL
from movieBrowser.gui.main_window  import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Movie Browser")
    apply_dark_palette(app)
    log_debug(f"Starting Movie Browser against {MOVIE_API_URL}")

    # -------- create main window; the fetch starts once it is shown ----
    window = MainWindow()
    window.show()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
