"""End-to-end tests through a real ASGI client (httpx.ASGITransport)."""

import httpx
import pytest

from junction.app import App
from junction.errors import NotFound
from junction.http.request import Request, RequestState
from junction.http.response import Response


def _app() -> App:
    def list_repos(request: Request, state: RequestState) -> dict[str, object]:
        return {"org": state.path_params["org"], "filter": state.query.get("filter", {})}

    async def show_issue(request: Request, state: RequestState) -> dict[str, str]:
        if state.path_params["number"] == "0":
            raise NotFound("issue 0 does not exist")
        return dict(state.path_params)

    def not_found(request: Request, state: RequestState) -> Response:
        return Response(f"<p>{request.path} is not here</p>", status=404)

    return App(
        routes={
            "/orgs/:org/repos": list_repos,
            "/orgs/:org/repos/:repo/issues/:number": show_issue,
            "404": not_found,
        }
    )


@pytest.fixture
def client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=_app()), base_url="http://testserver")


class TestOverHTTP:
    @pytest.mark.asyncio
    async def test_nested_query(self, client: httpx.AsyncClient) -> None:
        async with client:
            response = await client.get(
                "/orgs/acme/repos",
                params={"filter[lang]": "python", "filter[stars][min]": "10"},
            )
        assert response.status_code == 200
        assert response.json() == {
            "org": "acme",
            "filter": {"lang": "python", "stars": {"min": 10}},
        }

    @pytest.mark.asyncio
    async def test_multiple_params(self, client: httpx.AsyncClient) -> None:
        async with client:
            response = await client.get("/orgs/acme/repos/widget/issues/12")
        assert response.json() == {"org": "acme", "repo": "widget", "number": "12"}

    @pytest.mark.asyncio
    async def test_handler_not_found(self, client: httpx.AsyncClient) -> None:
        async with client:
            response = await client.get("/orgs/acme/repos/widget/issues/0")
        assert response.status_code == 404
        assert response.text == "issue 0 does not exist"

    @pytest.mark.asyncio
    async def test_fallback_route(self, client: httpx.AsyncClient) -> None:
        async with client:
            response = await client.get("/nothing/here")
        assert response.status_code == 404
        assert response.text == "<p>/nothing/here is not here</p>"
        assert response.headers["content-type"] == "text/html; charset=utf-8"
