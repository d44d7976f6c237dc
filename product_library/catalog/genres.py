"""
==============================================================================
Genre Registry Module
==============================================================================

Interning table for genres. Every product naming the same genre holds the
same ``Genre`` instance.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, List

from .models import Genre


# Module logger
logger = logging.getLogger(__name__)


class GenreRegistry:
    """
    Name-keyed table of shared Genre instances.

    Example:
        >>> registry = GenreRegistry()
        >>> registry.intern("Fantasy") is registry.intern("Fantasy")
        True
        >>> registry.count()
        1
    """

    def __init__(self) -> None:
        self._genres: Dict[str, Genre] = {}

    def intern(self, name: str) -> Genre:
        """
        Get the Genre for ``name``, creating it on first use.

        Empty names are interned like any other.
        """
        genre = self._genres.get(name)
        if genre is None:
            genre = Genre(name=name)
            self._genres[name] = genre
            logger.debug(f"Interned new genre: {name!r}")
        return genre

    def count(self) -> int:
        """Number of distinct interned names."""
        return len(self._genres)

    def names(self) -> List[str]:
        """Interned names in first-seen order."""
        return list(self._genres)

    def __contains__(self, name: object) -> bool:
        return name in self._genres

    def __len__(self) -> int:
        return self.count()
