import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEMINI_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
)
PLACEHOLDER_API_KEY = "YOUR_GEMINI_API_KEY"

GEMINI_API_URL = os.getenv("GEMINI_API_URL", DEFAULT_GEMINI_API_URL)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "").strip()
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///users.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
