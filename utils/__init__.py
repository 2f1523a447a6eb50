from .logging_config import InterceptHandler, configure_logging

__all__ = [
    "InterceptHandler",
    "configure_logging",
]
