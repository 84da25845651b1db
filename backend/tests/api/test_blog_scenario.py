"""End-to-end scenario — create, share twice, foreign delete refused."""

BASE = "/api/v1/blogs"


async def test_create_share_and_foreign_delete(client, alice, bob, auth_headers):
    created = await client.post(
        f"{BASE}/post",
        json={"title": "A", "description": "B", "content": "C", "theme": "light"},
        headers=auth_headers(alice),
    )
    assert created.status_code == 201
    data = created.json()["data"]
    assert data["share"] == 0
    assert data["author"]["username"] == "alice"
    blog_id = data["id"]

    await client.put(f"{BASE}/{blog_id}/share")
    shared = await client.put(f"{BASE}/{blog_id}/share")
    assert shared.json()["data"]["shareCount"] == 2

    refused = await client.delete(f"{BASE}/{blog_id}", headers=auth_headers(bob))
    assert refused.status_code == 403

    still_there = await client.get(f"{BASE}/{blog_id}")
    assert still_there.status_code == 200
    assert still_there.json()["data"]["share"] == 2
