from .url_parser import URLParser

__all__ = ["URLParser"]
