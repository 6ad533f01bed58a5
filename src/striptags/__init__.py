from .stripper import TagStripper, strip_tags

__version__ = "0.1.0"

__all__ = [
    "TagStripper",
    "__version__",
    "strip_tags",
]
