import pytest

from dream_ai import AiClient


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code


class RecordingPost:
    """Stand-in for Session.post that records every call."""

    def __init__(self, text: str = "{}", status_code: int = 200, error: Exception = None):
        self.text = text
        self.status_code = status_code
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text, self.status_code)


@pytest.fixture
def client():
    ai = AiClient()
    ai.initialize_client("sk-test", "https://llm.example/v1/chat/completions")
    yield ai
    ai.close()


@pytest.fixture
def fake_post(client, monkeypatch):
    post = RecordingPost()
    monkeypatch.setattr(client._session, "post", post)
    return post
