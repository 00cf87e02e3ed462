import os

from dotenv import load_dotenv

load_dotenv()

HOST = "0.0.0.0"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
JSON_LOGS = os.environ.get("JSON_LOGS", "false").strip().lower() in {"1", "true", "yes", "on"}

_port = os.environ.get("RECEIPT_SERVICE_PORT", "8080")
try:
    PORT = int(_port)
except ValueError:
    raise ValueError(f"RECEIPT_SERVICE_PORT must be an integer, got {_port!r}")
