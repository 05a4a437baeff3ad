"""
conftest.py

Test configuration for splashy tests.

Defines Pytest fixtures for supplying test data to tests across the entire
test suite. Fixtures used within only a single module are defined
directly in that module.

No test in the suite touches the network. Unsplash is replaced by an httpx.MockTransport
whose handler records every request it receives, so tests can assert on what was sent
(path, query parameters, headers, number of calls) as well as on what came back.
"""

import httpx
import pytest

from splashy.unsplash_handler import PhotoApiClient

TEST_ACCESS_KEY = "test-access-key"
TEST_API_URL = "https://api.unsplash.test"


def make_photo(photo_id: str, likes: int = 0, description: str = None) -> dict:
    """Build a photo document shaped like the ones Unsplash returns."""

    return {
        "id": photo_id,
        "created_at": "2024-05-04T09:12:44Z",
        "description": description,
        "alt_description": f"alt text for {photo_id}",
        "likes": likes,
        "urls": {
            size: f"https://images.unsplash.test/photo-{photo_id}?size={size}"
            for size in ("raw", "full", "regular", "small", "thumb")
        },
        "user": {
            "name": "Ada Lovelace",
            "username": "ada",
            "location": None,
            "profile_image": {"small": "https://images.unsplash.test/profile-ada"},
        },
        # not part of the documented shape, must survive untouched
        "blur_hash": "LEHV6nWB2yk8pyo0adR*.7kCMdnj",
    }


@pytest.fixture
def photos() -> list[dict]:
    return [make_photo("abc123", likes=12, description="a lighthouse"), make_photo("def456")]


@pytest.fixture
def search_body(photos) -> dict:
    return {"total": 133, "total_pages": 14, "results": photos}


class RecordingHandler:
    """
    Callable for httpx.MockTransport. Answers every request with the configured status code and
    JSON body (or raw content) and keeps the requests it saw in self.requests.
    """

    def __init__(self, status_code: int = 200, json=None, content: bytes = None, error: Exception = None):
        self.status_code = status_code
        self.json = json
        self.content = content
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        if self.content is not None:
            return httpx.Response(
                self.status_code, content=self.content, headers={"content-type": "application/json"}
            )

        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture
def access_key() -> str:
    return TEST_ACCESS_KEY


@pytest.fixture
def api_url() -> str:
    return TEST_API_URL


@pytest.fixture
def recording_handler():
    """
    Return a factory for RecordingHandler so each test can configure the response it needs.
    """

    return RecordingHandler


@pytest.fixture
def make_client():
    """
    Return a factory that builds a PhotoApiClient wired to a MockTransport around handler.
    """

    def inner(handler, access_key: str = TEST_ACCESS_KEY, base_url: str = TEST_API_URL):
        return PhotoApiClient(
            access_key=access_key, base_url=base_url, transport=httpx.MockTransport(handler)
        )

    return inner
