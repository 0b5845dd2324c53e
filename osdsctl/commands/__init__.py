from . import volume

__all__ = ['volume']
