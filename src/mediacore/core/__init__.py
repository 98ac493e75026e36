from .config import MediaConfig

__all__ = ["MediaConfig"]
