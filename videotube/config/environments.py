import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 8080
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_MAX_PAGE = 1_000_000
DEFAULT_MAX_LIMIT = 100
DEFAULT_SESSION_COOKIE_NAME = "session_token"

PORT = int(os.getenv("PORT", DEFAULT_PORT))
ENVIRONMENT = os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT)
LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")]
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "false").lower() in ("1", "true", "yes")

PAGE_DEFAULT = int(os.getenv("DEFAULT_PAGE", DEFAULT_PAGE))
LIMIT_DEFAULT = int(os.getenv("DEFAULT_LIMIT", DEFAULT_LIMIT))
MAX_PAGE = int(os.getenv("MAX_PAGE", DEFAULT_MAX_PAGE))
MAX_LIMIT = int(os.getenv("MAX_LIMIT", DEFAULT_MAX_LIMIT))

SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", DEFAULT_SESSION_COOKIE_NAME)

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is missing! Set it in your .env file.")

SUPABASE_PROJECT_URL = os.getenv("SUPABASE_PROJECT_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
if not all([SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY]):
    raise RuntimeError("SUPABASE related environment variable is missing! Set it in your .env file.")

VIDEO_BUCKET = os.getenv("VIDEO_BUCKET", "videos")
THUMBNAIL_BUCKET = os.getenv("THUMBNAIL_BUCKET", "thumbnails")
