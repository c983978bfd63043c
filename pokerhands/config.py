import os

HOST = os.getenv("POKERHANDS_HOST", "0.0.0.0")
PORT = int(os.getenv("POKERHANDS_PORT", "8080"))
LOG_LEVEL = os.getenv("POKERHANDS_LOG_LEVEL", "INFO").upper()
