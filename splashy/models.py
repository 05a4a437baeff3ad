"""
Unsplash payload shapes

Type descriptions for the JSON documents returned by the Unsplash API. These are TypedDicts
and not classes with behaviour: splashy hands back the decoded JSON exactly as Unsplash sent
it, these types only tell a type checker (and a reader) what to expect inside. Only the
fields splashy's own commands look at are listed, any other upstream fields are still
present at runtime.

See https://unsplash.com/documentation#list-photos for the full schema.
"""

from typing import Optional, TypedDict


class PhotoUrls(TypedDict):
    raw: str
    full: str
    regular: str
    small: str
    thumb: str


class ProfileImage(TypedDict, total=False):
    small: str
    medium: str
    large: str


class PhotoUser(TypedDict):
    name: str
    username: str
    location: Optional[str]
    profile_image: ProfileImage


class Photo(TypedDict):
    id: str
    urls: PhotoUrls
    user: PhotoUser
    description: Optional[str]
    alt_description: Optional[str]
    likes: int
    created_at: str


class SearchResponse(TypedDict):
    """Body of GET /search/photos."""

    total: int
    total_pages: int
    results: list[Photo]
