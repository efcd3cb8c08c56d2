from utils.pattern import Singleton
from datetime import datetime
import logging
import os

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}

class ScreenFormatter(logging.Formatter):
    GREY = "\x1b[38;20m"
    BLUE = "\x1b[34;20m"
    YELLOW = "\x1b[33;20m"
    GREEN = "\x1b[32;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    LINE = f"{GREEN}%(asctime)s{RESET} - ""{0}%(levelname)s"\
        f"{RESET} [%(module)s:%(lineno)d - %(funcName)s()] -> "\
        "{0}%(message)s"f"{RESET}"

    FORMATS = {
        logging.DEBUG: LINE.format(GREY),
        logging.INFO: LINE.format(BLUE),
        logging.WARNING: LINE.format(YELLOW),
        logging.ERROR: LINE.format(RED),
        logging.CRITICAL: LINE.format(BOLD_RED)
    }

    def format(self, record: logging.LogRecord) -> str:
        return logging.Formatter(self.FORMATS.get(record.levelno)).format(record)

class FileFormatter(logging.Formatter):
    FORMAT = "[%(asctime)s (%(module)s:%(lineno)d - %(funcName)s())] %(levelname)s -> %(message)s"

    def format(self, record: logging.LogRecord) -> str:
        return logging.Formatter(self.FORMAT).format(record)

class Logger(logging.Logger, metaclass=Singleton):
    """
    Process-wide logger, configured by whoever creates it first.
    Screen output goes to stderr so stdout stays reserved for the demo.
    """

    def __init__(self, level: str = "info", to_screen: bool = True,
                 to_file: bool = False, log_dir: str = "Logs") -> None:
        """
        level: debug, info, warn, error, fatal
        log_dir: directory to store log files, default is 'Logs'
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LEVELS)}")
        super().__init__("factory_method")
        lvl_val = LEVELS[level]
        self.setLevel(lvl_val)

        if to_screen:
            h = logging.StreamHandler()
            h.setLevel(lvl_val)
            h.setFormatter(ScreenFormatter())
            self.addHandler(h)

        if to_file:
            os.makedirs(log_dir, exist_ok=True)
            log_filename = os.path.join(log_dir, f"log_{datetime.now().strftime('%Y-%m-%d')}.log")
            h = logging.FileHandler(log_filename, encoding="utf-8")
            h.setLevel(lvl_val)
            h.setFormatter(FileFormatter())
            self.addHandler(h)

        # Silent when nothing is configured, no fallback to logging.lastResort
        if not self.handlers:
            self.addHandler(logging.NullHandler())

    def close(self) -> None:
        for h in list(self.handlers):
            h.close()
            self.removeHandler(h)
