import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Read an integer setting; a malformed value fails at import with its name."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "plp_bookstore")
COLLECTION_NAME = os.getenv("COLLECTION_NAME", "books")

# ---- Logging ----
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Milliseconds to wait for a reachable server before giving up.
# Settings are read once at import, before the script's error handling starts.
SERVER_SELECTION_TIMEOUT_MS = _int_env("SERVER_SELECTION_TIMEOUT_MS", 5000)
