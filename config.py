import os
from pathlib import Path

# Server
HOST = os.getenv("TASKS_HOST", "0.0.0.0")
PORT = int(os.getenv("TASKS_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Client
API_BASE_URL = os.getenv("TASKS_API_URL", "http://localhost:8000").rstrip("/")
CACHE_PATH = Path(os.getenv("TASKS_CACHE_PATH", str(Path.home() / ".tasks_cache.json")))

# Frontend templates; the default assumes the app runs from a checkout
TEMPLATES_DIR = Path(os.getenv("TASKS_TEMPLATES_DIR", str(Path(__file__).resolve().parent / "templates")))
