"""
movieBrowser
~~~~~~~~~~~~

Desktop browser for a paginated movie API: a grid of poster cards and a
detail overlay per movie.

Exports:
  - MOVIE_API_URL
  - Utility functions: log_debug, setup_logging, apply_dark_palette
  - MainWindow GUI entrypoint
"""

# settings
from movieBrowser.settings import MOVIE_API_URL

# utils
from movieBrowser.utils import log_debug, setup_logging, apply_dark_palette

# GUI entrypoint
from movieBrowser.gui.main_window import MainWindow

__all__ = [
    # settings
    "MOVIE_API_URL",
    # utils
    "log_debug",
    "setup_logging",
    "apply_dark_palette",
    # GUI
    "MainWindow",
]
