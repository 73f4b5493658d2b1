from httpx import AsyncClient


def bearer(access_token: str) -> dict:
    return {"Authorization": f"Bearer {access_token}"}


async def login(client: AsyncClient, username: str = "alice", password: str = "secret123") -> str:
    """Log in with the standard form; returns the access token"""
    response = await client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 303, response.text
    return response.json()["access_token"]
