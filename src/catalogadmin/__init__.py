"""
catalogadmin - Video catalog administration.

A REST backend for managing categories, genres, cast members and videos,
paired with an admin client offering filterable, paginated server-side lists.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "catalogadmin"
__email__ = "noreply@catalogadmin.dev"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
