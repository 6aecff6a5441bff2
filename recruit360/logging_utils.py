# logging_utils.py
import logging
from typing import Optional, Union

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO.
_NOISY_LOGGERS = ("urllib3", "sqlalchemy.engine")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger once per process.

    - Always logs to the console.
    - If log_file is given, also appends to that file.
    - `level` may be a logging constant or a name such as "DEBUG".
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    handlers.append(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
