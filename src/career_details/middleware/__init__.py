from .logger_middleware import StructLogMiddleware

__all__ = ["StructLogMiddleware"]
