"""
Test configuration and fixtures
"""

import json
import os
import sys
import tempfile

import httpx
import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep test logs out of the project tree.
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="textassist-logs-"))

from textassist.core.config import ProviderConfig  # noqa: E402


ALL_KEYS = {"openai": "sk-test", "huggingface": "hf-test", "gemini": "gm-test"}


def make_config(selector: str = "mock", **credentials) -> ProviderConfig:
    """Build a ProviderConfig; credentials default to a test key for every provider."""
    keys = dict(ALL_KEYS)
    keys.update(credentials)
    return ProviderConfig(selector=selector, credentials=keys)


class RecordingUpstream:
    """
    Fake provider endpoint backed by httpx.MockTransport.

    Records every request and answers with the configured status and body.
    """

    def __init__(self, status_code: int = 200, body=None, raw_body: str = None, exc: Exception = None):
        self.status_code = status_code
        self.body = body
        self.raw_body = raw_body
        self.exc = exc
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw_body is not None:
            return httpx.Response(self.status_code, text=self.raw_body)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def mock_config():
    """Provider config selecting the mock provider."""
    return make_config("mock")


@pytest.fixture
def upstream():
    """Factory for fake upstream endpoints."""
    return RecordingUpstream


def openai_body(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def gemini_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def huggingface_body(text):
    return [{"generated_text": text}]
