from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (optional file)
load_dotenv(BASE_DIR / ".env")

MOVIE_API_URL = os.getenv("MOVIE_API_URL", "https://jsonfakery.com/movies/paginated")
HTTP_TIMEOUT  = float(os.getenv("MOVIE_API_TIMEOUT", "10"))

# File / folder paths
LOG_PATH  = Path(os.getenv("MOVIE_BROWSER_LOG_PATH", BASE_DIR / "movie_browser.log"))
LOG_LEVEL = os.getenv("MOVIE_BROWSER_LOG_LEVEL", "INFO").upper()

# User-facing messages
FETCH_FAILED_MESSAGE  = "Failed to load movies. Please check your network or API endpoint."
NO_MOVIES_IN_RESPONSE = "No movies found in the response."
NO_MOVIES_MESSAGE     = "No movies found."
LOADING_MESSAGE       = "Loading movies..."
NO_CAST_MESSAGE       = "No cast information available."

# Literal fallbacks
UNTITLED_MOVIE   = "Untitled Movie"
UNKNOWN          = "Unknown"
UNKNOWN_DIRECTOR = "Unknown Director"
UNKNOWN_ACTOR    = "Unknown Actor"
NO_PLOT          = "No plot available."
NO_RATING        = "N/A"

# Placeholder images (first = missing field, second = load failure)
CARD_POSTER_PLACEHOLDER   = "https://placehold.co/180x260/555/FFF?text=No+Poster"
CARD_POSTER_FALLBACK      = "https://placehold.co/180x260/E50914/FFFFFF?text=No+Poster+Available"
DETAIL_POSTER_PLACEHOLDER = "https://placehold.co/300x450/333/fff?text=No+Poster"
DETAIL_POSTER_FALLBACK    = "https://placehold.co/300x450/E50914/FFFFFF?text=No+Poster+Available"
ACTOR_PHOTO_PLACEHOLDER   = "https://placehold.co/70x70/333/fff?text={initial}"
ACTOR_PHOTO_FALLBACK      = "https://placehold.co/70x70/E50914/FFFFFF?text={initial}"

# UI constants
ACCENT_COLOR     = "#e50914"
BACKGROUND_COLOR = "#181818"
PANEL_COLOR      = "#222222"
HEADER_COLOR     = "#000000"
MUTED_TEXT_COLOR = "#9ca3af"

CARD_WIDTH    = 240
CARD_HEIGHT   = 340
GRID_SPACING  = 32
DETAIL_POSTER = (300, 450)
ACTOR_PHOTO   = (80, 80)
