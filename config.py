import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

APP_TITLE = os.getenv("TASKS_APP_TITLE", "Tasks")
LOG_LEVEL = os.getenv("TASKS_LOG_LEVEL", "INFO").upper()
TEMPLATES_DIR = Path(os.getenv("TASKS_TEMPLATES_DIR", str(BASE_DIR / "templates")))

# Cookie that ties a browser view to its in-memory TaskView
VIEW_COOKIE = os.getenv("TASKS_VIEW_COOKIE", "task_view_id")
MAX_VIEWS = int(os.getenv("TASKS_MAX_VIEWS", "1000"))
