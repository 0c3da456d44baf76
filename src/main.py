"""Entry point — wires Config → ReceiptAnalyzer → FastAPI → uvicorn."""
import logging

import uvicorn
from rich.logging import RichHandler

from src.config import Config
from src.constants import MSG_KEY_MISSING_WARNING, MSG_SERVER_STARTING, QUIET_LOGGERS
from src.server import create_app


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))
    # request lines carry the ?key= credential in the URL
    list(map(lambda name: logging.getLogger(name).setLevel(logging.WARNING), QUIET_LOGGERS))


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    if not config.gemini_api_key:
        logger.warning(MSG_KEY_MISSING_WARNING)
    logger.info(MSG_SERVER_STARTING, config.host, config.port)

    app = create_app(config)
    # log_config=None keeps uvicorn on the root RichHandler
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
