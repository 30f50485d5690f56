import os
from dotenv import load_dotenv

# Load environment variables early
load_dotenv()

# Server
HOST = "0.0.0.0"
PORT = int(os.getenv("PORT", "3000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
