"""Application configuration."""
import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Server configuration
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

# Article sources
ARTICLES_DIR = Path(os.getenv("ARTICLES_DIR", str(BASE_DIR / "articles")))
IMG_DIR = ARTICLES_DIR / "img"
ARTICLE_EXTENSION = os.getenv("ARTICLE_EXTENSION", ".md")

# Data directories
DATA_DIR = BASE_DIR / "data"

# Log directory
LOG_DIR = Path(os.getenv("LOG_DIR", str(DATA_DIR / "logs")))
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
