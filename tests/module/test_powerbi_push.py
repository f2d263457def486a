"""Module test for reporting a recorded run to a WireMock push endpoint."""

import json
from pathlib import Path

import pytest
from wiremock.client import (
    HttpMethods,
    Mapping,
    MappingRequest,
    MappingResponse,
    Mappings,
)
from wiremock.testing.testcontainer import WireMockContainer

from powerbi_reporter.cli import run

pytestmark = pytest.mark.module


def write_recording(path: Path) -> Path:
    """Write a two-item run with one failed assertion."""
    events = [
        {"event": "start", "timestamp": "2024-05-01T12:00:00Z"},
        {"event": "beforeItem", "args": {"item": {"name": "Get product"}}},
        {
            "event": "request",
            "args": {"response": {"responseTime": 120, "responseSize": 512}},
        },
        {
            "event": "assertion",
            "error": {"name": "AssertionError", "message": "expected 200"},
            "args": {"assertion": "status is 200"},
        },
        {"event": "done", "timestamp": "2024-05-01T12:00:02Z"},
    ]
    path.write_text("\n".join(json.dumps(event) for event in events) + "\n")
    return path


async def test_cli_posts_report_to_push_endpoint(
    tmp_path: Path, wiremock_server: WireMockContainer, push_url: str
) -> None:
    """Delivers the aggregate row accepted by the endpoint."""
    Mappings.delete_all_mappings()

    # Only a row with the expected labels and failure encoding is accepted
    Mappings.create_mapping(
        Mapping(
            request=MappingRequest(
                method=HttpMethods.POST,
                url_path="/datasets/runs/rows",
                body_patterns=[
                    {
                        "matchesJsonPath": (
                            "$[?(@.product == 'shop' && @.success == 0"
                            " && @.avgResponseTime == 120)]"
                        )
                    }
                ],
            ),
            response=MappingResponse(status=200, body="accepted"),
        )
    )

    config = json.dumps(
        {
            "powerbiURL": push_url,
            "product": "shop",
            "component": "api",
            "environment": "QA",
        }
    )

    exit_code = await run(write_recording(tmp_path / "run.jsonl"), "Shop API", config)

    assert exit_code == 0


async def test_cli_reports_rejection(
    tmp_path: Path, wiremock_server: WireMockContainer, push_url: str
) -> None:
    """Exits with an error when the endpoint rejects the row."""
    Mappings.delete_all_mappings()

    Mappings.create_mapping(
        Mapping(
            request=MappingRequest(
                method=HttpMethods.POST, url_path="/datasets/runs/rows"
            ),
            response=MappingResponse(status=400, body="bad row"),
        )
    )

    config = json.dumps({"powerbiURL": push_url, "product": "shop"})

    exit_code = await run(write_recording(tmp_path / "run.jsonl"), "Shop API", config)

    assert exit_code == 1
