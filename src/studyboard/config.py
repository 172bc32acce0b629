"""Runtime settings read from the environment."""
import os

LOG_LEVEL = os.getenv("STUDYBOARD_LOG_LEVEL", "WARNING").upper()
DUE_LIMIT = int(os.getenv("STUDYBOARD_DUE_LIMIT", "20"))
PASSING_SCORE = float(os.getenv("STUDYBOARD_PASSING_SCORE", "70"))
DEFAULT_REVIEW_HOUR = int(os.getenv("STUDYBOARD_DEFAULT_REVIEW_HOUR", "9"))
