"""
Ghibli Graph
GraphQL facade over the Studio Ghibli REST API
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
