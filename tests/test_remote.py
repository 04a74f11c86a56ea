"""Tests for RemoteObjectService against an in-process httpx transport."""

import httpx
import pytest

from catalogclient.model import CatalogObject
from catalogclient.remote import SESSION_HEADER, RemoteObjectService
from catalogclient.service import CatalogObjectService


def make_remote(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return RemoteObjectService(client=client)


def test_fetch_text_sends_session_header():
    seen = {}

    def handler(request):
        seen["sessionid"] = request.headers.get(SESSION_HEADER)
        seen["url"] = str(request.url)
        return httpx.Response(200, text="content")

    with make_remote(handler) as remote:
        assert remote.fetch_text("http://catalog/buckets/1/resources/a/raw", "abc") == "content"

    assert seen == {"sessionid": "abc", "url": "http://catalog/buckets/1/resources/a/raw"}


def test_fetch_text_without_session_omits_header():
    def handler(request):
        assert SESSION_HEADER not in request.headers
        return httpx.Response(200, text="ok")

    with make_remote(handler) as remote:
        assert remote.fetch_text("http://x/a") == "ok"


def test_fetch_text_raises_on_http_error():
    with make_remote(lambda request: httpx.Response(404, text="missing")) as remote:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            remote.fetch_text("http://x/a", "sid")

    assert exc_info.value.response.status_code == 404


def test_fetch_text_raises_on_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with make_remote(handler) as remote:
        with pytest.raises(httpx.ConnectError):
            remote.fetch_text("http://x/a")


def test_fetch_typed_validates_json():
    def handler(request):
        assert request.headers["Accept"] == "application/json"
        return httpx.Response(200, json={"name": "wf", "bucket_id": 2, "kind": "workflow"})

    with make_remote(handler) as remote:
        catalog_object = remote.fetch_typed("http://x/buckets/2/resources/wf", "sid", CatalogObject)

    assert catalog_object == CatalogObject(name="wf", bucket_id=2, kind="workflow")


def test_fetch_typed_rejects_invalid_json():
    with make_remote(lambda request: httpx.Response(200, text="not json")) as remote:
        with pytest.raises(ValueError):
            remote.fetch_typed("http://x/a", None, CatalogObject)


def test_service_resolves_links_over_http():
    pages = {
        "/catalog/buckets/5/resources/main/raw": 'echo PA:GET_FROM_URL(&quot;http://files/lib&quot;)',
        "/lib": "library $1 code",
    }

    def handler(request):
        assert request.headers[SESSION_HEADER] == "sid"
        return httpx.Response(200, text=pages[request.url.path])

    with make_remote(handler) as remote:
        service = CatalogObjectService(remote=remote)
        resolved = service.get_resolved_catalog_object("http://catalog/catalog/", 5, "main", True, "sid")

    assert resolved == "echo library $1 code"


def test_from_config_reads_fetcher_section():
    remote = RemoteObjectService.from_config({"user_agent": "test-agent", "timeout": 5, "max_redirects": 2})
    try:
        assert remote.user_agent == "test-agent"
        assert remote.timeout == 5.0
        assert remote.max_redirects == 2
    finally:
        remote.close()
