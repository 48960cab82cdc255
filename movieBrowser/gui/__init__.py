"""
gui
~~~
All Qt widgets and the controller that owns the view state.

•  No HTTP here – the fetch goes through `metadata.api_clients`.
•  Re-export the high-level symbols so the app can simply:

    from movieBrowser.gui import MainWindow
"""

from movieBrowser.gui.controller     import MovieBrowserController, MovieBrowserState, view_mode
from movieBrowser.gui.main_window    import MainWindow
from movieBrowser.gui.movie_list     import MovieGrid
from movieBrowser.gui.movie_card     import MovieCard
from movieBrowser.gui.details_dialog import MovieDetailsModal
from movieBrowser.gui.remote_image   import RemoteImageLabel

__all__ = [
    "MovieBrowserController", "MovieBrowserState", "view_mode",
    "MainWindow", "MovieGrid", "MovieCard", "MovieDetailsModal", "RemoteImageLabel",
]
