import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> None:
    """Configure logging for the battle balance simulator.

    Console output follows *log_level*; the rotating file under *log_dir*
    (``logs/`` by default) always records DEBUG so per-matchup results are
    kept even when the console is quiet. Calling this twice is a no-op.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)

        # 5MB per file, 3 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "battle_balance.log", maxBytes=5 * 1024 * 1024, backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(level)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", log_level, log_to_file
    )
