"""Project-wide single-source configuration constants for the registration dashboard."""

import os
from pathlib import Path

from dotenv import load_dotenv

from utils.path_utils import find_repo_root

# ----- Base directory configuration -------
PROJECT_ROOT: Path = find_repo_root()

# Deployment-specific values may come from the environment or a local .env file
load_dotenv(PROJECT_ROOT / ".env")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ------ Registration Statistics Service -------
API_BASE_URL: str = os.getenv("REGISTRATION_API_URL", "http://localhost:5000")
REQUEST_TIMEOUT_S: float = float(os.getenv("REQUEST_TIMEOUT_S", "10"))

TOTAL_REGISTRATIONS_PATH: str = "/api/total-registrations"
BY_PROGRAMME_PATH: str = "/api/registrations-by-programme"
BY_YEAR_PATH: str = "/api/registrations-by-year"
TOP_SCHOOLS_PATH: str = "/api/top-schools"

# ------ Fetch cycle -------
FETCH_MAX_WORKERS: int = int(os.getenv("FETCH_MAX_WORKERS", "4"))  # one per endpoint
TOP_SCHOOLS_LIMIT: int = 10

# ------ Filters -------
ALL_SENTINEL: str = "all"           # "no constraint"; query parameter is omitted
ALL_YEARS_LABEL: str = "All Years"
ALL_PROGRAMMES_LABEL: str = "All Programmes"

# ------ UI behaviour -------
SHOW_FETCH_ERRORS: bool = _env_bool("SHOW_FETCH_ERRORS", False)  # non-fatal banner on failed cycles

# ------- Chart styling -------
BAR_COLOR: str = "#3f51b5"
LINE_COLOR: str = "#4caf50"
LINE_WIDTH: float = 3.0
CHART_FIGSIZE: tuple[float, float] = (9.0, 3.6)
BAR_LABEL_ROTATION: int = 30            # degrees, labels anchored at their right end
