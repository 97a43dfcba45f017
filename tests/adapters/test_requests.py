"""Tests for the versioned request builders."""

from __future__ import annotations

import json

import httpx
import pytest

from adapters.requests import (
    DotcomRequest,
    HTTPMethod,
    JetpackRequest,
    WooAPIVersion,
    WordPressAPIVersion,
)
from core.errors import InvalidRequestError
from tests.conftest import SITE_ID, form_fields


class TestJetpackRequest:
    def test_get_is_tunneled_as_query_parameters(self, settings) -> None:
        request = JetpackRequest(
            WooAPIVersion.MARK2,
            HTTPMethod.GET,
            SITE_ID,
            "orders/567/shipment-trackings/",
        )

        built = request.build(settings)

        assert built.method == "GET"
        assert built.url.path == f"/rest/v1.1/jetpack-blogs/{SITE_ID}/rest-api/"
        assert built.url.params["json"] == "true"
        assert built.url.params["path"] == "/wc/v2/orders/567/shipment-trackings/&_method=get"
        assert "query" not in built.url.params

    def test_get_parameters_go_in_query(self, settings) -> None:
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, SITE_ID, "products", {"page": "2", "per_page": "10"})

        built = request.build(settings)

        assert json.loads(built.url.params["query"]) == {"page": "2", "per_page": "10"}

    @pytest.mark.parametrize("method", [HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.DELETE])
    def test_non_get_methods_are_tunneled_through_post(self, settings, method: HTTPMethod) -> None:
        request = JetpackRequest(WooAPIVersion.MARK3, method, SITE_ID, "orders/963", {"status": "completed"})

        built = request.build(settings)
        fields = form_fields(built)

        assert built.method == "POST"
        assert fields["path"] == f"/wc/v3/orders/963&_method={method.value.lower()}"
        assert json.loads(fields["body"]) == {"status": "completed"}
        assert "query" not in fields

    def test_unversioned_path(self) -> None:
        request = JetpackRequest(WooAPIVersion.NONE, HTTPMethod.GET, SITE_ID, "settings")
        assert request.jetpack_path == "/settings"
        assert request.description == "GET /settings"

    def test_build_is_pure(self, settings) -> None:
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, SITE_ID, "products", {"page": "1"})
        first = request.build(settings)
        second = request.build(settings)
        assert first.url == second.url

    def test_parameters_are_copied(self) -> None:
        parameters = {"page": "1"}
        request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, SITE_ID, "products", parameters)
        parameters["page"] = "9"
        assert request.parameters["page"] == "1"

    @pytest.mark.parametrize("site_id", [0, -1])
    def test_rejects_invalid_site(self, site_id: int) -> None:
        with pytest.raises(InvalidRequestError):
            JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, site_id, "products")

    def test_rejects_empty_path(self) -> None:
        with pytest.raises(InvalidRequestError):
            JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.GET, SITE_ID, "")


class TestDotcomRequest:
    def test_get(self, settings) -> None:
        request = DotcomRequest(
            WordPressAPIVersion.MARK1_1,
            HTTPMethod.GET,
            f"sites/{SITE_ID}/stats/orders/",
            {"unit": "day", "quantity": 3},
        )

        built = request.build(settings)

        assert str(built.url).startswith(f"https://api.example.test/rest/v1.1/sites/{SITE_ID}/stats/orders/")
        assert built.url.params["quantity"] == "3"
        assert request.description == f"GET /rest/v1.1/sites/{SITE_ID}/stats/orders/"

    def test_post_sends_form_body(self, settings) -> None:
        request = DotcomRequest(WordPressAPIVersion.MARK1_2, HTTPMethod.POST, "me/settings", {"a": "b"})

        built = request.build(settings)

        assert built.method == "POST"
        assert built.url.path == "/rest/v1.2/me/settings"
        assert form_fields(built) == {"a": "b"}

    def test_trailing_slash_in_base_url(self, settings) -> None:
        settings = settings.model_copy(update={"dotcom_base_url": "https://api.example.test/"})
        built = DotcomRequest(WordPressAPIVersion.MARK1_1, HTTPMethod.GET, "me").build(settings)
        assert built.url.host == "api.example.test"
        assert built.url.path == "/rest/v1.1/me"


async def test_build_with_client_carries_default_headers(settings) -> None:
    client = httpx.AsyncClient(headers={"Authorization": "Bearer secret-token", "User-Agent": "woo-remote/0.1"})
    request = JetpackRequest(WooAPIVersion.MARK3, HTTPMethod.POST, SITE_ID, "orders/963", {"status": "completed"})

    built = request.build(settings, client)
    await client.aclose()

    assert built.headers["Authorization"] == "Bearer secret-token"
    assert built.headers["User-Agent"] == "woo-remote/0.1"
    assert form_fields(built)["path"] == "/wc/v3/orders/963&_method=post"
