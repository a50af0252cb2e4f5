"""
Reference data sources for the geobase library.

OptdLoader reads the reference tables from a data directory; OptdSource
downloads the opentraveldata files into it.
"""

from .cached import CachedSource
from .optd import OptdLoader, OptdSource

__all__ = [
    'CachedSource',
    'OptdLoader',
    'OptdSource',
]
