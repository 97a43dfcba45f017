"""CLI tests (Typer CliRunner over a mocked transport)."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

import cli._runtime as runtime
import cli.main as cli_main
from cli.main import app
from tests.conftest import ORDER_ID, SITE_ID, form_fields, jetpack_body

runner = CliRunner()


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch, settings, make_network):
    """Route every CLI request to a list of canned responses."""

    seen: list[httpx.Request] = []
    responses: list[httpx.Response] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return responses.pop(0)

    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_main, "load_settings", lambda: settings)
    monkeypatch.setattr(runtime, "load_settings", lambda: settings)
    monkeypatch.setattr(runtime, "build_network", lambda _settings: make_network(handler))
    return seen, responses


def test_trackings_list(backend, tracking_payload, tmp_path: Path) -> None:
    seen, responses = backend
    responses.append(httpx.Response(200, content=jetpack_body(tracking_payload)))
    output = tmp_path / "trackings.json"

    result = runner.invoke(app, ["trackings", "list", str(SITE_ID), str(ORDER_ID), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "Shipment Trackings" in result.output
    assert seen[0].url.params["path"] == f"/wc/v2/orders/{ORDER_ID}/shipment-trackings/&_method=get"
    exported = json.loads(output.read_text(encoding="utf-8"))
    assert [item["tracking_id"] for item in exported] == ["b1b94eb2", "3b29c43b"]
    assert exported[0]["date_shipped"] == "2019-02-15"


def test_trackings_add_with_custom_link(backend, tracking_payload) -> None:
    seen, responses = backend
    responses.append(httpx.Response(200, content=jetpack_body(tracking_payload[0])))

    result = runner.invoke(
        app,
        ["trackings", "add", str(SITE_ID), str(ORDER_ID), "-n", "LC-77", "-p", "Courier", "--link", "https://c.example/1"],
    )

    assert result.exit_code == 0, result.output
    body = json.loads(form_fields(seen[0])["body"])
    assert body == {
        "custom_tracking_link": "https://c.example/1",
        "custom_tracking_provider": "Courier",
        "tracking_number": "LC-77",
    }


def test_remote_error_exits_with_code_1(backend) -> None:
    _, responses = backend
    responses.append(httpx.Response(403, json={"error": "unauthorized", "message": "Nope"}))

    result = runner.invoke(app, ["orders", "list", str(SITE_ID)])

    assert result.exit_code == 1
    assert "unauthorized" in result.output


def test_validate_sku_in_use(backend) -> None:
    _, responses = backend
    responses.append(httpx.Response(200, content=jetpack_body([{"sku": "GR-1"}])))

    result = runner.invoke(app, ["products", "validate-sku", str(SITE_ID), "GR-1"])

    assert result.exit_code == 1
    assert "already in use" in result.output


def test_inventory_duplicated_sku(backend, product_payload) -> None:
    seen, responses = backend
    responses.append(httpx.Response(200, content=jetpack_body(product_payload)))
    responses.append(httpx.Response(200, content=jetpack_body([{"sku": "TAKEN"}])))

    result = runner.invoke(app, ["products", "inventory", str(SITE_ID), "282", "--sku", "TAKEN", "--save"])

    assert result.exit_code == 1
    assert "Cannot update product" in result.output
    assert len(seen) == 2


def test_inventory_save(backend, product_payload) -> None:
    seen, responses = backend
    responses.append(httpx.Response(200, content=jetpack_body(product_payload)))
    responses.append(httpx.Response(200, content=jetpack_body(product_payload)))

    result = runner.invoke(
        app,
        ["products", "inventory", str(SITE_ID), "282", "--no-manage-stock", "--stock-status", "outofstock", "--save"],
    )

    assert result.exit_code == 0, result.output
    body = json.loads(form_fields(seen[1])["body"])
    assert body["manage_stock"] is False
    assert body["stock_status"] == "outofstock"
    assert "Inventory updated." in result.output


def test_stats_summary(backend, monkeypatch: pytest.MonkeyPatch, make_network) -> None:
    seen: list[httpx.Request] = []
    routes = {
        "/stats/orders/": {
            "date": "2019-02-15",
            "unit": "day",
            "total_gross_sales": 25.0,
            "total_orders": 2,
            "fields": ["period", "orders", "currency"],
            "data": [["2019-02-15", 2, "USD"]],
        },
        "/stats/visits/": {
            "date": "2019-02-15",
            "unit": "day",
            "fields": ["period", "visitors"],
            "data": [["2019-02-15", 8]],
        },
    }

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        suffix = next(key for key in routes if request.url.path.endswith(key))
        return httpx.Response(200, json=routes[suffix])

    monkeypatch.setattr(runtime, "build_network", lambda _settings: make_network(handler))

    result = runner.invoke(app, ["stats", "summary", str(SITE_ID), "--date", "2019-02-15"])

    assert result.exit_code == 0, result.output
    assert "$25" in result.output
    assert seen[0].url.params["unit"] == "day"


def test_stats_summary_rejects_bad_date(backend) -> None:
    result = runner.invoke(app, ["stats", "summary", str(SITE_ID), "--date", "15/02/2019"])
    assert result.exit_code != 0


def test_invalid_site_exits_with_code_1(backend) -> None:
    seen, _ = backend

    result = runner.invoke(app, ["trackings", "list", "0", str(ORDER_ID)])

    assert result.exit_code == 1
    assert "site_id must be a positive integer" in result.output
    assert seen == []
