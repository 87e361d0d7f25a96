import os

from app.config.settings import Settings
from app.shared.logger.structured_logger import StructuredLogger

settings = Settings()

# Ensure the log directory exists
log_dir = os.path.dirname(settings.app.log_file)
if log_dir and not os.path.exists(log_dir):
    os.makedirs(log_dir, exist_ok=True)


def get_logger(name: str = None) -> StructuredLogger:
    """
    Return the StructuredLogger for `name` (the app name by default).
    Loggers are cached by name, so repeated calls share handlers.
    """
    return StructuredLogger(
        name=name or settings.app.app_name,
        log_file=settings.app.log_file,
        level=settings.app.log_level,
    )


logger: StructuredLogger = get_logger()
