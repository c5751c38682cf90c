import os

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)


API_BASE_URL = os.getenv("MOVIE_PLANNER_API_BASE_URL", "http://localhost:8000").rstrip("/")
API_TIMEOUT = _optional_float("MOVIE_PLANNER_API_TIMEOUT")
RATINGS_CACHE_TTL = int(os.getenv("MOVIE_PLANNER_RATINGS_CACHE_TTL", "60"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Streamlit page scripts, relative to the entry script
AUTH_PAGE = "MoviePlanner.py"
DISCOVER_PAGE = "pages/1_Discover.py"
ACCOUNT_PAGE = "pages/2_My_Account.py"
