"""CORS — every origin is allowed by default, on preflight and on plain requests."""

ORIGIN = {"Origin": "http://x.example"}


async def test_preflight_allows_any_origin(client):
    res = await client.options(
        "/demo/health",
        headers={**ORIGIN, "Access-Control-Request-Method": "GET"},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"


async def test_simple_request_allows_any_origin(client):
    res = await client.get("/demo/health", headers=ORIGIN)
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
