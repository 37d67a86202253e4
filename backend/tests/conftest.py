import json

import pytest

from student_service.main import app
from student_service.repositories import StudentRepository


class FakeStreamResponse:
    """Stand-in for a streamed `requests.Response`."""

    def __init__(self, status_code=200, chunks=()):
        self.status_code = status_code
        self._chunks = list(chunks)
        self.consumed = 0
        self.closed = False

    def iter_content(self, chunk_size=None):
        for chunk in self._chunks:
            self.consumed += 1
            yield chunk

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class FakeSession:
    """Records POST calls and replies with a prepared response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def ndjson(*frames) -> list:
    """Encode frames as newline-delimited JSON chunks."""
    return [(json.dumps(f) + "\n").encode("utf-8") for f in frames]


@pytest.fixture
def repo(monkeypatch):
    """Give each test an empty repository on the app."""
    fresh = StudentRepository()
    monkeypatch.setattr(app.state, "students", fresh)
    return fresh
