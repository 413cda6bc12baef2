# ABOUTME: Runtime settings for the weather search app, read from the environment.
# ABOUTME: Loads an optional .env file; every setting has a working default.

import os

from dotenv import load_dotenv

load_dotenv()

GEOCODING_URL = os.environ.get("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.environ.get("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

SEARCH_DEBOUNCE_SECONDS = float(os.environ.get("SEARCH_DEBOUNCE_SECONDS", "0.3"))
HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "10"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))
