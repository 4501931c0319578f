import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# Request bounds (fixed, not read from the environment)
MIN_DAYS = 1
MAX_DAYS = 365

# Export settings
SCHEDULE_OUTPUT_DIR = os.getenv("SCHEDULE_OUTPUT_DIR", "storage/schedules")
SCHEDULE_EXPORT_FORMAT = os.getenv("SCHEDULE_EXPORT_FORMAT", "markdown")
