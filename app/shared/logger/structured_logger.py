import inspect
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import structlog
from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()


class StructuredLogger:
    """
    Named logger that writes every event twice: a colored line to the
    console and a JSON line to the log file.

    Instances are cached by name, so constructing the same name twice
    reuses the underlying handlers.
    """

    _logger_cache: Dict[str, "StructuredLogger"] = {}

    LEVEL_COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.MAGENTA,
    }

    def __init__(self, name: str = "default", log_file: str = "app.log", level: str = "INFO", context: Optional[dict] = None):
        self.name = name
        self.context = context or {}

        if name in self._logger_cache:
            cached = self._logger_cache[name]
            self.console_logger = cached.console_logger
            self.file_logger = cached.file_logger
            return

        numeric_level = getattr(logging, level.upper(), logging.INFO)

        # ----------------------------
        # Console logger
        # ----------------------------
        console_logger = logging.getLogger(f"{name}_console")
        console_logger.setLevel(numeric_level)
        console_logger.propagate = False
        if not console_logger.handlers:
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("%(message)s"))
            console_logger.addHandler(ch)

        self.console_logger = structlog.wrap_logger(
            console_logger,
            processors=[
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.add_log_level,
                _add_caller,
                self._render_console,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        ).bind(logger=name, **self.context)

        # ----------------------------
        # File logger (JSON)
        # ----------------------------
        file_logger = logging.getLogger(f"{name}_file")
        file_logger.setLevel(numeric_level)
        file_logger.propagate = False
        if not any(isinstance(h, logging.FileHandler) for h in file_logger.handlers):
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(logging.Formatter("%(message)s"))
            file_logger.addHandler(fh)

        self.file_logger = structlog.wrap_logger(
            file_logger,
            processors=[
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.add_log_level,
                structlog.processors.format_exc_info,
                _add_caller,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        ).bind(logger=name, **self.context)

        self._logger_cache[name] = self

    def _render_console(self, logger, method_name, event_dict) -> str:
        ts = event_dict.pop("timestamp", None) or datetime.now(timezone.utc).isoformat()
        level = event_dict.pop("level", method_name).upper()
        logger_name = event_dict.pop("logger", self.name)
        msg = event_dict.pop("event", "")
        module = event_dict.pop("module", "")
        func = event_dict.pop("function", "")
        lineno = event_dict.pop("lineno", "")
        event_dict.pop("exc_info", None)

        extras = " ".join(f"{k}={v}" for k, v in event_dict.items())
        line = f"{ts} [{logger_name}] {level}: {msg}"
        if extras:
            line = f"{line} {extras}"
        # Caller info only matters once something went wrong
        if level in ("WARNING", "ERROR", "CRITICAL") and module:
            line = f"{line} ({module}.{func}:{lineno})"

        color = self.LEVEL_COLORS.get(level, Fore.WHITE)
        return f"{color}{line}{Style.RESET_ALL}"

    # ----------------------------
    # Logging methods
    # ----------------------------
    def debug(self, msg: str, **extra):
        self.console_logger.debug(msg, **extra)
        self.file_logger.debug(msg, **extra)

    def info(self, msg: str, **extra):
        self.console_logger.info(msg, **extra)
        self.file_logger.info(msg, **extra)

    def warning(self, msg: str, **extra):
        self.console_logger.warning(msg, **extra)
        self.file_logger.warning(msg, **extra)

    def error(self, msg: str, **extra):
        self.console_logger.error(msg, **extra)
        self.file_logger.error(msg, **extra)

    def exception(self, msg: str, **extra):
        self.console_logger.exception(msg, **extra)
        self.file_logger.exception(msg, **extra)


def _add_caller(logger, method_name, event_dict):
    """Attach the first frame outside structlog and this module."""
    frame = inspect.currentframe()
    while frame:
        module_name = frame.f_globals.get("__name__", "")
        if module_name and not module_name.startswith("structlog") and module_name != __name__:
            event_dict["module"] = module_name
            event_dict["function"] = frame.f_code.co_name
            event_dict["lineno"] = frame.f_lineno
            break
        frame = frame.f_back
    return event_dict
