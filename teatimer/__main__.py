"""Allow running the tea timer as a module: python -m teatimer."""

import logging
import sys

from .app import TeaTimerApp
from .model import AppModel
from .settings import Settings, load_settings

logger = logging.getLogger("teatimer")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> logging.Logger:
    """Send package logs to the debug file, or nowhere.

    The terminal belongs to the TUI, so there is never a console handler.
    Raises ``OSError`` if the debug log cannot be opened.
    """
    logger.handlers.clear()
    logger.propagate = False
    if not settings.debug:
        logger.addHandler(logging.NullHandler())
        return logger

    handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger


def main() -> None:
    settings = load_settings()
    try:
        setup_logging(settings)
    except OSError as exc:
        print(f"fatal: cannot open debug log {settings.log_file}: {exc}", file=sys.stderr)
        sys.exit(1)

    app = TeaTimerApp(AppModel(settings=settings))
    try:
        app.run()
    except Exception as exc:
        logger.exception("event loop failed")
        print(f"fatal: {exc}", file=sys.stderr)
        sys.exit(1)

    if app.return_code:
        logger.error("app exited with return code %s", app.return_code)
        sys.exit(1)


if __name__ == "__main__":
    main()
