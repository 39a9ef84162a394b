import os
from dotenv import load_dotenv

load_dotenv()
APP_TITLE = os.getenv("APP_TITLE", "Fat Loss Calculator")
TEMPLATES_DIR = os.getenv(
    "TEMPLATES_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
