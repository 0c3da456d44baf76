from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import json
import logging
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_HOST,
    DEFAULT_INFERENCE_TIMEOUT,
    DEFAULT_PORT,
    DEFAULT_RUNTIME_CONFIG_PATH,
    GEMINI_API_BASE,
    GEMINI_MODEL,
    MSG_RUNTIME_CONFIG_FAILED,
    TRUTHY,
)

logger = logging.getLogger(__name__)


def _runtime_config_key(path: Path) -> Optional[str]:
    """Read gemini.key from the platform runtime config file, if any."""
    match path.exists():
        case False:
            return None
        case True:
            try:
                with open(path) as f:
                    raw = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(MSG_RUNTIME_CONFIG_FAILED, e)
                return None
    match raw:
        case {"gemini": {"key": str() as key}} if key:
            return key
        case _:
            return None


@dataclass(frozen=True)
class Config:
    gemini_api_key: Optional[str] = field(repr=False)
    gemini_model: str
    gemini_api_base: str
    inference_timeout: float
    require_auth: bool
    log_level: str
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        runtime_config_path = Path(
            os.getenv("RUNTIME_CONFIG_PATH", DEFAULT_RUNTIME_CONFIG_PATH)
        )
        api_key = os.getenv("GEMINI_API_KEY") or _runtime_config_key(runtime_config_path)
        model = os.getenv("GEMINI_MODEL") or GEMINI_MODEL
        api_base = os.getenv("GEMINI_API_BASE") or GEMINI_API_BASE
        timeout = os.getenv("INFERENCE_TIMEOUT", DEFAULT_INFERENCE_TIMEOUT)
        require_auth = os.getenv("REQUIRE_AUTH", "false")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        host = os.getenv("HOST", DEFAULT_HOST)
        port = os.getenv("PORT", DEFAULT_PORT)

        return cls._validate(
            gemini_api_key=api_key,
            gemini_model=model,
            gemini_api_base=api_base.rstrip("/"),
            inference_timeout=float(timeout),
            require_auth=require_auth.strip().lower() in TRUTHY,
            log_level=log_level,
            host=host,
            port=int(port),
        )

    @staticmethod
    def _validate(
        gemini_api_key: Optional[str],
        gemini_model: str,
        gemini_api_base: str,
        inference_timeout: float,
        require_auth: bool,
        log_level: str,
        host: str,
        port: int,
    ) -> "Config":
        match inference_timeout:
            case t if t <= 0:
                raise ValueError("INFERENCE_TIMEOUT must be greater than zero")
            case _:
                pass

        return Config(
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            gemini_api_base=gemini_api_base,
            inference_timeout=inference_timeout,
            require_auth=require_auth,
            log_level=log_level,
            host=host,
            port=port,
        )
