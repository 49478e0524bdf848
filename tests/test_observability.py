import logging

import httpx
import pytest
import respx
from youtrack_client.client import RetryConfig, YouTrackClient, YouTrackClientError
from youtrack_client.core.request import RequestDescriptor
from youtrack_client.observability import endpoint_of, log_event


def test_log_event_drops_reserved_keys(caplog):
    caplog.set_level(logging.INFO, logger="youtrack_client.observability")
    log_event("custom", tool="x", name="clash", lineno=3)

    record = next(r for r in caplog.records if r.getMessage() == "custom")
    assert record.tool == "x"
    assert record.name == "youtrack_client.observability"


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_success(caplog):
    caplog.set_level(logging.INFO, logger="youtrack_client.observability")
    route = respx.get("https://yt.example.com/api/workItems").mock(
        return_value=httpx.Response(200, json=[])
    )
    client = YouTrackClient(base_url="https://yt.example.com", token="t")
    try:
        await client.fetch(RequestDescriptor(url="api/workItems"), tool="work_items")
    finally:
        await client.aclose()

    assert route.called
    record = next(r for r in caplog.records if r.getMessage() == "yt_call")
    assert record.tool == "work_items"
    assert record.status == 200
    assert record.method == "GET"
    assert record.endpoint == "api/workItems"
    assert record.duration_ms >= 0


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_exception(caplog):
    caplog.set_level(logging.INFO, logger="youtrack_client.observability")
    respx.get("https://yt.example.com/api/issues").mock(
        side_effect=httpx.ConnectTimeout("boom")
    )
    client = YouTrackClient(
        base_url="https://yt.example.com",
        token="t",
        retry=RetryConfig(max_retries=0),
    )
    with pytest.raises(YouTrackClientError):
        await client.fetch(RequestDescriptor(url="api/issues"), tool="issues")
    await client.aclose()

    record = next(r for r in caplog.records if r.getMessage() == "yt_call")
    assert record.tool == "issues"
    assert record.status == "exception"
    assert record.error_type == "ConnectTimeout"
    assert record.endpoint == "api/issues"


@pytest.mark.asyncio
@respx.mock
async def test_client_debug_log_per_attempt(caplog):
    caplog.set_level(logging.DEBUG, logger="youtrack_client.client")
    respx.get("https://yt.example.com/api/issues").mock(
        side_effect=[httpx.Response(502), httpx.Response(200, json=[])]
    )
    client = YouTrackClient(
        base_url="https://yt.example.com",
        token="t",
        retry=RetryConfig(backoff_base_seconds=0.0),
    )
    async with client:
        await client.fetch(RequestDescriptor(url="api/issues"))

    attempts = [r.attempt for r in caplog.records if r.getMessage() == "yt.request"]
    assert attempts == [0, 1]


def test_log_event_tolerates_message_key(caplog):
    caplog.set_level(logging.INFO, logger="youtrack_client.observability")
    log_event("custom", message="clash", asctime="now", tool="x")

    record = next(r for r in caplog.records if r.getMessage() == "custom")
    assert record.tool == "x"


def test_endpoint_of_drops_query():
    assert endpoint_of("api/workItems?fields=id&%24top=5") == "api/workItems"
    assert endpoint_of("api/admin/workflows/54-1") == "api/admin/workflows/54-1"


@pytest.mark.asyncio
@respx.mock
async def test_call_event_keeps_query_out_of_endpoint(caplog):
    caplog.set_level(logging.INFO, logger="youtrack_client.observability")
    respx.get("https://yt.example.com/api/workItems").mock(
        return_value=httpx.Response(200, json=[])
    )
    async with YouTrackClient(base_url="https://yt.example.com", token="t") as client:
        await client.fetch(
            RequestDescriptor(url="api/workItems?query=for%3A%20me&fields=id"),
            tool="work_items",
        )

    record = next(r for r in caplog.records if r.getMessage() == "yt_call")
    assert record.endpoint == "api/workItems"
    assert record.error_type is None
