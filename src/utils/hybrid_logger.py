"""
Hybrid logger - per-class logging with colored console output and optional log file
"""

import logging
import sys
import traceback
from contextlib import suppress
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Formatter producing '[time] [level] [class] message', optionally colored"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = False):
        self.use_colors = use_colors
        super().__init__('[%(asctime)s] [%(levelname)s] [%(class_name)s] %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'class_name'):
            record.class_name = 'Main'

        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            formatted = f"{color}{formatted}{self.COLORS['RESET']}"

        return formatted


class ClassLogger:
    """
    Per-class logger wrapper with its own minimum level.

    Every record is tagged with the owning class name, so one shared
    logging.Logger can serve all components of the game.
    """

    def __init__(self, main_logger: logging.Logger, class_name: str, level: int):
        self.main_logger = main_logger
        self.class_name = class_name
        self.level = level

    def _log(self, level: int, message: str, exc_info: bool = False) -> None:
        if level < self.level:
            return
        exc_info_tuple = sys.exc_info() if exc_info else None
        record = self.main_logger.makeRecord(
            self.main_logger.name, level, "", 0, message, (), exc_info_tuple
        )
        record.class_name = self.class_name
        self.main_logger.handle(record)

    def debug(self, message: str) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: str, exception: Optional[Exception] = None) -> None:
        """Log error message, appending type and origin of the exception if given"""
        if exception:
            exc_type = type(exception).__name__
            tb = traceback.extract_tb(exception.__traceback__)
            filename, lineno, _, _ = tb[-1] if tb else ("unknown", 0, "unknown", "")
            enhanced_message = f"{message} | Type: {exc_type} | File: {filename} | Line: {lineno}"
            self._log(logging.ERROR, enhanced_message, exc_info=True)
        else:
            self._log(logging.ERROR, message)
        # Errors are flushed right away so a crash right after still leaves a trace
        self.flush()

    def critical(self, message: str) -> None:
        self._log(logging.CRITICAL, message)
        self.flush()

    def create_class_logger(self, class_name: str, level: Optional[int] = None) -> 'ClassLogger':
        """
        Create a sibling logger for another class sharing the same handlers.

        Args:
            class_name: Name shown in the [class] column
            level: Minimum level (defaults to this logger's level)
        """
        return ClassLogger(self.main_logger, class_name, self.level if level is None else level)

    def flush(self) -> None:
        """Flush all handlers of the underlying logger"""
        for handler in self.main_logger.handlers:
            with suppress(OSError, ValueError):
                handler.flush()


class HybridLogger:
    """
    Logger factory with per-class loggers, colored stdout and an optional log file.

    Usage:
        main_logger = HybridLogger("SimonBox")
        logger = main_logger.get_class_logger("GameController", logging.DEBUG)
        logger.info("ready")
        ...
        main_logger.cleanup()
    """

    def __init__(self, name: str = "app", log_dir: Optional[str] = "logs", console: bool = True):
        """
        Args:
            name: Logger name, also used as the log file prefix
            log_dir: Directory for timestamped log files, None disables file logging
            console: Whether to log to stdout
        """
        self.name = name
        self.log_dir = log_dir
        self.console = console
        self.main_logger: Optional[logging.Logger] = None
        self.class_loggers: Dict[str, ClassLogger] = {}
        self._setup_main_logger()

    def _setup_main_logger(self) -> None:
        self.main_logger = logging.getLogger(self.name)
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers.clear()

        if self.console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(use_colors=True))
            self.main_logger.addHandler(console_handler)

        if self.log_dir is not None:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)
            log_filename = Path(self.log_dir) / f"{self.name}_{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"
            file_handler = logging.FileHandler(log_filename, encoding="utf-8")
            file_handler.setFormatter(ColoredFormatter(use_colors=False))
            self.main_logger.addHandler(file_handler)

    def get_class_logger(self, class_name: str, level: int = logging.INFO) -> ClassLogger:
        """
        Get (or create) the logger of a specific class.

        Args:
            class_name: Name of the class for log identification
            level: Minimum log level

        Returns:
            ClassLogger: cached logger for the class
        """
        if class_name not in self.class_loggers:
            self.class_loggers[class_name] = ClassLogger(self.main_logger, class_name, level)
        return self.class_loggers[class_name]

    def cleanup(self) -> None:
        """Flush and close all handlers"""
        if self.main_logger:
            for handler in self.main_logger.handlers:
                with suppress(OSError, ValueError):
                    handler.flush()
                    handler.close()
            self.main_logger.handlers.clear()
