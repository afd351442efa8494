"""Tests for the dynalarm CLI commands."""

import json

import httpx
from typer.testing import CliRunner

from cli.cli import app

runner = CliRunner()

SOFT = "2024-01-15T06:00:00.000Z"
HARD = "2024-01-15T08:00:00.000Z"


def test_plan_raw_output_matches_api_shape():
    """Test that plan prints the same payload the HTTP endpoint returns."""
    result = runner.invoke(app, ["plan", "--soft", SOFT, "--hard", HARD, "--seed", "3", "--raw"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert set(payload) == {"target", "data", "metadata"}
    assert len(payload["data"]) == payload["metadata"]["arraySize"]


def test_plan_with_seed_is_reproducible():
    args = ["plan", "--soft", SOFT, "--hard", HARD, "--seed", "11", "--raw"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0
    assert first.stdout == second.stdout


def test_plan_rejects_inverted_window():
    """Test that validation errors print a panel and exit 1."""
    result = runner.invoke(app, ["plan", "--soft", HARD, "--hard", SOFT])
    assert result.exit_code == 1
    assert "Soft limit must be before hard limit" in result.stdout


def test_server_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(target, **kwargs):
        calls["target"] = target
        calls.update(kwargs)

    monkeypatch.setattr("cli.cli.uvicorn.run", fake_run)

    result = runner.invoke(app, ["server", "--host", "127.0.0.1", "--port", "9000"])

    assert result.exit_code == 0, result.output
    assert calls == {"target": "dynalarm.main:app", "host": "127.0.0.1", "port": 9000, "reload": False}


def test_check_reports_healthy_server(monkeypatch):
    def mock_get(url, *args, **kwargs):
        request = httpx.Request("GET", url)
        return httpx.Response(
            200,
            json={"status": "OK", "message": "Dynamic Alarm System is running", "timestamp": {"utc": SOFT}},
            request=request,
        )

    monkeypatch.setattr(httpx, "get", mock_get)

    result = runner.invoke(app, ["check", "--url", "http://alarm.test"])
    assert result.exit_code == 0, result.output
    assert "Dynamic Alarm System is running" in result.stdout


def test_check_reports_unreachable_server(monkeypatch):
    def mock_get(url, *args, **kwargs):
        raise httpx.ConnectError("connection refused", request=httpx.Request("GET", url))

    monkeypatch.setattr(httpx, "get", mock_get)

    result = runner.invoke(app, ["check", "--url", "http://alarm.test"])
    assert result.exit_code == 1
    assert "not reachable" in result.stdout
