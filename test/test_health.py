async def test_alive(client):
    response = await client.get("/health/alive")
    assert response.status_code == 200
    assert response.json() == {"message": "yes"}


async def test_ready(client):
    response = await client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["database"] == "ok"


async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"status": 404, "message": "Not Found"}
