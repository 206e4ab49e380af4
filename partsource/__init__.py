from partsource.errors import PartNotFound, PartSourceIOError
from partsource.source import DirLibSource

__all__ = ["DirLibSource", "PartNotFound", "PartSourceIOError"]
