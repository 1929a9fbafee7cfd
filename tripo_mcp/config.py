"""
Runtime configuration.

Values come from the process environment; entry points call
``load_dotenv()`` first so a local ``.env`` file is honoured.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

SERVER_NAME = "tripo-ai-mcp-server"
SERVER_VERSION = "1.0.0"

DEFAULT_BASE_URL = "https://api.tripo3d.ai/v2/openapi"
DEFAULT_FILE_TYPE = "jpg"
DEFAULT_TIMEOUT = 60.0
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    if raw.strip().lower() in ("0", "none", "off"):
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid TRIPO_HTTP_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    upload_url: Optional[str] = None
    default_file_type: str = DEFAULT_FILE_TYPE
    timeout: Optional[float] = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("TRIPO_API_KEY", ""),
            base_url=os.getenv("TRIPO_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            upload_url=os.getenv("TRIPO_UPLOAD_URL") or None,
            default_file_type=os.getenv("TRIPO_DEFAULT_FILE_TYPE", DEFAULT_FILE_TYPE),
            timeout=_parse_timeout(os.getenv("TRIPO_HTTP_TIMEOUT")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("MCP_HOST", "0.0.0.0"),
            port=int(os.getenv("MCP_PORT", "8000")),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
