from .metadata import NAME, VERSION
from .optional import Optional

__version__ = VERSION

__all__ = [
    "Optional",
    "NAME",
    "VERSION",
]
