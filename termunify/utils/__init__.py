from .various import log_performance

__all__ = ["log_performance"]
