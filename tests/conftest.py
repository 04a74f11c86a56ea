"""Shared fixtures: an in-memory stand-in for the remote object service."""

import pytest

from catalogclient.service import CatalogObjectService


class FakeRemote:
    """Serves text and typed objects from dictionaries and records every call."""

    def __init__(self, texts=None, objects=None):
        self.texts = dict(texts or {})
        self.objects = dict(objects or {})
        self.calls = []

    def fetch_text(self, url, session_id=None):
        self.calls.append(("text", url, session_id))
        return self.texts[url]

    def fetch_typed(self, url, session_id, type_):
        self.calls.append(("typed", url, session_id))
        return type_.model_validate(self.objects[url])


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def service(remote):
    return CatalogObjectService(remote=remote)
