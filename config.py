import os

# ============================
# REMOTE TASK STORE
# ============================

TASKS_API_URL = os.getenv("TASKS_API_URL", "http://localhost:8000").rstrip("/")

HEADERS = {
    "Content-Type": "application/json",
}

LOG_FILE = os.getenv("LOG_FILE", "app.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# ============================
# EISENHOWER MATRIX
# ============================

QUADRANTS = ["DO", "SCHEDULE", "DELEGATE", "ELIMINATE"]

QUADRANT_STYLES = {
    "DO": "glass border-red glow-red",
    "SCHEDULE": "glass border-green glow-green",
    "DELEGATE": "glass border-yellow glow-yellow",
    "ELIMINATE": "glass border-blue glow-blue",
}

HEADING_STYLES = {
    "DO": "heading bg-red",
    "SCHEDULE": "heading bg-green",
    "DELEGATE": "heading bg-yellow",
    "ELIMINATE": "heading bg-blue",
}
