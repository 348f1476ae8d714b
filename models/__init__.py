# models/__init__.py

from .certificate import Certificate
from .film import Film

# For migrations or Flask shell usage
__all__ = [
    "Certificate",
    "Film",
]
