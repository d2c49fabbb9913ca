"""Configuration for the recurring event instance generator."""
import os
from dotenv import load_dotenv

# Load environment variables from a local .env if present
load_dotenv()

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Generation limits
MAX_OCCURRENCES = int(os.environ.get("MAX_OCCURRENCES", "366"))
DEFAULT_OCCURRENCES = int(os.environ.get("DEFAULT_OCCURRENCES", "10"))

# Form defaults used by the generator session
DEFAULT_EVENT_TIME = os.environ.get("DEFAULT_EVENT_TIME", "09:00")
DEFAULT_RECURRENCE = os.environ.get("DEFAULT_RECURRENCE", "weekly")
DEFAULT_WEEKDAY = int(os.environ.get("DEFAULT_WEEKDAY", "1"))  # Monday
DEFAULT_WINDOW_MONTHS = int(os.environ.get("DEFAULT_WINDOW_MONTHS", "1"))
