import logging
import logging.config
import os
import re

DEFAULT_LOG_FILE = "chat_ledger.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Messages start with a bracketed area tag, e.g. "[INTERPRET]" or "[LEDGER]"
_TAG_PATTERN = re.compile(r" - (\[[A-Z_]+\])")


class ColourizedFormatter(logging.Formatter):
    """
    Colours the level name and the leading area tag of each message.
    """
    GREY = "\x1b[90m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    CYAN = "\x1b[36m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        orig_levelname = record.levelname
        colour = self.LEVEL_COLORS.get(record.levelno)
        if colour:
            record.levelname = f"{colour}{record.levelname}{self.RESET}"
        try:
            result = super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = orig_levelname
        return _TAG_PATTERN.sub(rf" - {self.CYAN}\1{self.RESET}", result, count=1)


def get_logging_config() -> dict:
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = os.getenv("LOG_DIR")
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "colour",
        },
    }
    root_handlers = ["console"]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": os.path.join(log_dir, os.getenv("LOG_FILE") or DEFAULT_LOG_FILE),
            "formatter": "plain",
        }
        root_handlers.append("file")

    def routed(level: str) -> dict:
        return {"handlers": root_handlers, "level": level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "colour": {
                "()": "chat_ledger.logger.ColourizedFormatter",
                "format": LOG_FORMAT,
            },
            # No escape codes in files
            "plain": {"format": LOG_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            "": {"handlers": root_handlers, "level": log_level_name},
            "uvicorn": routed("INFO"),
            "uvicorn.error": routed("INFO"),
            "uvicorn.access": routed("WARNING"),
        },
    }


def setup_logging() -> None:
    logging.config.dictConfig(get_logging_config())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
