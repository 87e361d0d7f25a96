from functools import wraps
import inspect

from app.config.logger import get_logger


def LoggerBinding(name: str = None):
    """Give a class a named StructuredLogger when it is built without one."""
    def decorator(cls):
        orig_init = cls.__init__
        if "logger" not in inspect.signature(orig_init).parameters:
            raise TypeError(f"{cls.__name__}.__init__ must accept a `logger` argument")

        @wraps(orig_init)
        def __init__(self, *args, **kwargs):
            if kwargs.get("logger") is None:
                kwargs["logger"] = get_logger(name or cls.__name__)
            orig_init(self, *args, **kwargs)

        cls.__init__ = __init__
        return cls
    return decorator
