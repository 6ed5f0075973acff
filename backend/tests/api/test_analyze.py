"""POST /api/analyze — stubbed trend insight for any submitted data.

Invariants:
    - Any JSON body (empty, missing `data`, arbitrary `data`) → 200 + fixed insight
    - `data` reaches the backend unvalidated; absent or non-object body → None
    - URL-encoded form bodies are accepted like JSON bodies
    - Undecodable bodies → generic 500 (no parser detail leaked)
"""

import pytest

from layoff_insights.api.dependencies import get_analytics_service
from tests.api.expected_payloads import EXPECTED_INSIGHT
from tests.api.fake_backends import RecordingAnalyticsService


async def test_example_scenario(client):
    res = await client.post("/api/analyze", json={"data": [1, 2, 3]})
    assert res.status_code == 200
    assert res.content == (
        b'{"trend":"Increasing Layoffs",'
        b'"predictions":"Expected rise in layoffs by 5% next quarter"}'
    )


@pytest.mark.parametrize("payload", [
    {},
    {"other": True},
    {"data": None},
    {"data": "free text"},
    {"data": {"nested": {"deep": [1, "two", 3.0]}}},
    [1, 2, 3],
    42,
])
async def test_any_json_body_returns_fixed_insight(client, payload):
    res = await client.post("/api/analyze", json=payload)
    assert res.status_code == 200
    assert res.json() == EXPECTED_INSIGHT


async def test_no_body_returns_fixed_insight(client):
    res = await client.post("/api/analyze")
    assert res.status_code == 200
    assert res.json() == EXPECTED_INSIGHT


async def test_form_body_returns_fixed_insight(client):
    res = await client.post("/api/analyze", data={"data": "layoffs"})
    assert res.status_code == 200
    assert res.json() == EXPECTED_INSIGHT


async def test_unknown_content_type_is_treated_as_empty(client):
    res = await client.post(
        "/api/analyze", content=b"<data>1</data>",
        headers={"content-type": "application/xml"},
    )
    assert res.status_code == 200
    assert res.json() == EXPECTED_INSIGHT


async def test_malformed_json_returns_generic_500(client):
    res = await client.post(
        "/api/analyze", content=b'{"data": [1, 2',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 500
    assert res.json() == {"message": "Internal Server Error"}


# --- data pass-through ------------------------------------------------------

@pytest.fixture
def recorder(test_app):
    backend = RecordingAnalyticsService()
    test_app.dependency_overrides[get_analytics_service] = lambda: backend
    return backend


async def test_data_field_passed_through_unchanged(client, recorder):
    await client.post("/api/analyze", json={"data": {"a": [1, None, "x"]}})
    assert recorder.received == [{"a": [1, None, "x"]}]


async def test_missing_data_field_passes_none(client, recorder):
    await client.post("/api/analyze", json={"unrelated": 1})
    assert recorder.received == [None]


async def test_non_object_body_passes_none(client, recorder):
    await client.post("/api/analyze", json=[1, 2, 3])
    assert recorder.received == [None]


async def test_form_field_passed_as_string(client, recorder):
    await client.post("/api/analyze", data={"data": "2025"})
    assert recorder.received == ["2025"]


async def test_repeated_form_field_passed_as_list(client, recorder):
    await client.post(
        "/api/analyze", content=b"data=a&data=b",
        headers={"content-type": "application/x-www-form-urlencoded"},
    )
    assert recorder.received == [["a", "b"]]


async def test_controller_serializes_backend_result(client, recorder):
    res = await client.post("/api/analyze", json={"data": 1})
    assert res.status_code == 200
    assert res.json() == {"trend": "Recorded", "predictions": "n/a"}
