import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper() or "INFO"

# Anthropic Messages API
ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_MODEL = "claude-3-haiku-20240307"
ANTHROPIC_MAX_TOKENS = 1000

# Language codes
DEFAULT_LANGUAGE = "en"
INDONESIAN = "id"
