"""Tests for service modules."""

import json

import httpx
import pytest

from restaurant_selector.services.cache_store import CacheStore
from restaurant_selector.services.data_source import DataSource, DataSourceSelector
from restaurant_selector.services.registration_client import RegistrationClient

SAMPLE_DOCUMENT = {
    "result": [
        {
            "id": 1,
            "restaurant": {"name": "A"},
            "menuType": {"id": 1, "label": "RW"},
            "periods": [{"id": 1}],
        }
    ]
}


def json_transport(payload, status_code=200, requests=None):
    """Build a mock transport answering every request with a JSON payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


class TestCacheStore:
    """Tests for the CacheStore."""

    @pytest.fixture
    def cache_store(self, tmp_path):
        """Create a cache store in a temporary directory."""
        return CacheStore(tmp_path / "cache.json")

    def test_exists_missing_file(self, cache_store):
        """Test that a missing cache file is reported absent."""
        assert cache_store.exists() is False

    def test_exists_directory(self, tmp_path):
        """Test that a directory is not treated as a cache file."""
        assert CacheStore(tmp_path).exists() is False

    def test_write_then_read(self, cache_store):
        """Test that written registrations are read back unchanged."""
        cache_store.write(SAMPLE_DOCUMENT["result"])

        assert cache_store.exists() is True
        assert cache_store.read() == SAMPLE_DOCUMENT["result"]

    def test_write_mirrors_api_document(self, cache_store):
        """Test that the file holds the API response shape."""
        cache_store.write(SAMPLE_DOCUMENT["result"])

        document = json.loads(cache_store.path.read_text(encoding="utf-8"))
        assert document == SAMPLE_DOCUMENT

    def test_write_overwrites(self, cache_store):
        """Test that the last write wins."""
        cache_store.write(SAMPLE_DOCUMENT["result"])
        cache_store.write([])

        assert cache_store.read() == []

    def test_read_missing_file(self, cache_store):
        """Test that reading a missing file returns an empty list."""
        assert cache_store.read() == []

    def test_read_invalid_json(self, cache_store):
        """Test that an unparseable file returns an empty list."""
        cache_store.path.write_text("{not json", encoding="utf-8")

        assert cache_store.read() == []

    def test_read_without_result_list(self, cache_store):
        """Test that a document without a result list returns an empty list."""
        cache_store.path.write_text('{"result": {"id": 1}}', encoding="utf-8")

        assert cache_store.read() == []

    def test_write_failure_raises(self, tmp_path):
        """Test that write errors propagate."""
        store = CacheStore(tmp_path / "missing-dir" / "cache.json")

        with pytest.raises(OSError):
            store.write([])


class TestRegistrationClient:
    """Tests for the RegistrationClient."""

    def test_fetch_returns_result_list(self):
        """Test that fetch returns the result entries."""
        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=json_transport(SAMPLE_DOCUMENT),
        )

        assert client.fetch() == SAMPLE_DOCUMENT["result"]

    def test_fetch_sends_listing_query(self):
        """Test the fixed listing query parameters."""
        requests = []
        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=json_transport(SAMPLE_DOCUMENT, requests=requests),
        )

        client.fetch()

        assert len(requests) == 1
        params = requests[0].url.params
        assert requests[0].method == "GET"
        assert params["page"] == "1"
        assert params["perPage"] == "200"
        assert params["order"] == "created_desc"
        assert params["agg"] == "true"

    def test_fetch_error_status(self):
        """Test that a non-success status yields an empty list."""
        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=json_transport({"error": "down"}, status_code=503),
        )

        assert client.fetch() == []

    def test_fetch_network_error(self):
        """Test that a connection failure yields an empty list."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=httpx.MockTransport(handler),
        )

        assert client.fetch() == []

    def test_fetch_timeout(self):
        """Test that a timeout yields an empty list."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("Timed out", request=request)

        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=httpx.MockTransport(handler),
        )

        assert client.fetch() == []

    def test_fetch_invalid_json(self):
        """Test that an unparseable body yields an empty list."""
        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, content=b"<html>")
            ),
        )

        assert client.fetch() == []

    def test_fetch_without_result_list(self):
        """Test that a body without a result list yields an empty list."""
        client = RegistrationClient(
            url="https://api.test/registrations",
            transport=json_transport({"data": []}),
        )

        assert client.fetch() == []


class StubClient:
    """Registration client returning canned entries."""

    def __init__(self, registrations):
        self.registrations = registrations
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return self.registrations


class TestDataSourceSelector:
    """Tests for the DataSourceSelector."""

    @pytest.fixture
    def cache_store(self, tmp_path):
        """Create a cache store in a temporary directory."""
        return CacheStore(tmp_path / "cache.json")

    def test_fetches_when_cache_missing(self, cache_store):
        """Test that a missing cache triggers a remote fetch."""
        client = StubClient(SAMPLE_DOCUMENT["result"])
        selector = DataSourceSelector(cache=cache_store, client=client)

        loaded = selector.load()

        assert client.calls == 1
        assert loaded.source is DataSource.REMOTE
        assert loaded.registrations == SAMPLE_DOCUMENT["result"]
        assert cache_store.read() == SAMPLE_DOCUMENT["result"]

    def test_reads_cache_when_present(self, cache_store):
        """Test that an existing cache is used without fetching."""
        cache_store.write(SAMPLE_DOCUMENT["result"])
        client = StubClient([])
        selector = DataSourceSelector(cache=cache_store, client=client)

        loaded = selector.load()

        assert client.calls == 0
        assert loaded.source is DataSource.CACHE
        assert loaded.registrations == SAMPLE_DOCUMENT["result"]

    def test_force_refresh_ignores_cache(self, cache_store):
        """Test that a forced refresh fetches even with a cache present."""
        cache_store.write([])
        client = StubClient(SAMPLE_DOCUMENT["result"])
        selector = DataSourceSelector(cache=cache_store, client=client)

        loaded = selector.load(force_refresh=True)

        assert client.calls == 1
        assert loaded.source is DataSource.REMOTE
        assert cache_store.read() == SAMPLE_DOCUMENT["result"]

    def test_cache_write_failure_keeps_fetched_data(self, tmp_path):
        """Test that a failed cache write still returns the fetched data."""
        cache_store = CacheStore(tmp_path / "missing-dir" / "cache.json")
        client = StubClient(SAMPLE_DOCUMENT["result"])
        selector = DataSourceSelector(cache=cache_store, client=client)

        loaded = selector.load()

        assert loaded.source is DataSource.REMOTE
        assert loaded.registrations == SAMPLE_DOCUMENT["result"]
