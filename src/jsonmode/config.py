import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

# OpenAI configuration
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None

# Diagnostic records are emitted at DEBUG, so the default keeps them hidden.
LOGGING_LEVEL = (os.getenv("LOGGING_LEVEL") or "WARNING").upper()

# Prefix for identifiers stamped on generated schema definitions
SCHEMA_ID_PREFIX = "urn:jsonschema:"
