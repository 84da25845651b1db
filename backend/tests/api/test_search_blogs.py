"""GET /api/v1/blogs/search — owner-scoped text search.

Invariants:
    - query is required (missing or blank → 400 SEARCH_QUERY_REQUIRED)
    - Only the caller's posts are searched
    - No match → empty list and totalBlogs 0, never an error
"""

URL = "/api/v1/blogs/search"


async def test_search_requires_auth(client):
    res = await client.get(URL, params={"query": "x"})
    assert res.status_code == 401


async def test_search_without_query_is_400(client, alice, auth_headers):
    res = await client.get(URL, headers=auth_headers(alice))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SEARCH_QUERY_REQUIRED"
    assert res.json()["message"] == "Search query is required"


async def test_search_blank_query_is_400(client, alice, auth_headers):
    res = await client.get(URL, params={"query": "  "}, headers=auth_headers(alice))
    assert res.status_code == 400


async def test_search_matches_callers_posts_only(
    client, alice, bob, make_blog, auth_headers,
):
    await make_blog(alice, title="Gardening in spring")
    await make_blog(alice, title="Cooking", description="spring vegetables")
    await make_blog(bob, title="Spring cleaning")
    res = await client.get(URL, params={"query": "SPRING"}, headers=auth_headers(alice))
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["totalBlogs"] == 2
    assert all(b["author"]["username"] == "alice" for b in data["blogs"])


async def test_search_with_theme(client, alice, make_blog, auth_headers):
    await make_blog(alice, title="notes", theme="dark")
    await make_blog(alice, title="notes", theme="vincent")
    data = (await client.get(
        URL, params={"query": "note", "theme": "vincent"}, headers=auth_headers(alice),
    )).json()["data"]
    assert data["totalBlogs"] == 1
    assert data["blogs"][0]["theme"] == "vincent"


async def test_search_no_match_is_empty(client, alice, make_blog, auth_headers):
    await make_blog(alice, title="hello")
    res = await client.get(URL, params={"query": "zzz"}, headers=auth_headers(alice))
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["blogs"] == []
    assert data["totalBlogs"] == 0
    assert data["totalPages"] == 0


async def test_search_long_query_is_empty_not_error(
    client, alice, make_blog, auth_headers,
):
    await make_blog(alice, title="short")
    res = await client.get(
        URL, params={"query": "q" * 500, "theme": "t" * 80},
        headers=auth_headers(alice),
    )
    assert res.status_code == 200
    assert res.json()["data"]["totalBlogs"] == 0
