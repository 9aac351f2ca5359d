from .logger import get_logger, log_context, log_event

__all__ = ["get_logger", "log_context", "log_event"]
