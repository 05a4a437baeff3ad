"""
splashy - a small asyncio client for the Unsplash photos API.
"""

from splashy.unsplash_handler import PhotoApiClient
from splashy.unsplash_handler import list_photos
from splashy.unsplash_handler import search_photos

__all__ = ["PhotoApiClient", "list_photos", "search_photos"]
