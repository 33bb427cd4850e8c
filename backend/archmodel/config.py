import logging
import os
from typing import Optional
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

LOG_LEVEL = os.getenv("ARCHMODEL_LOG_LEVEL", "WARNING")
API_TITLE = os.getenv("ARCHMODEL_API_TITLE", "Architecture Model Service")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ARCHMODEL_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
