"""
Tests for travel post endpoints.
"""

import pytest
from httpx import AsyncClient

POST_BODY = {
    "title": "Monsoon in Munnar",
    "content": "Tea estates under the clouds.",
    "category": "travel-tips",
}


@pytest.mark.asyncio
async def test_list_posts_is_public(client: AsyncClient):
    response = await client.get("/api/posts")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_host_creates_post(host_client: AsyncClient, client: AsyncClient, host):
    response = await host_client.post("/api/posts", json=POST_BODY)
    assert response.status_code == 201
    data = response.json()
    assert data["userId"] == host.id
    assert data["title"] == POST_BODY["title"]
    assert data["status"] == "published"

    listed = (await client.get("/api/posts")).json()
    assert [p["id"] for p in listed] == [data["id"]]


@pytest.mark.asyncio
async def test_admin_creates_draft(admin_client: AsyncClient):
    response = await admin_client.post("/api/posts", json={**POST_BODY, "status": "draft"})
    assert response.status_code == 201
    assert response.json()["status"] == "draft"


@pytest.mark.asyncio
async def test_traveler_cannot_create_post(traveler_client: AsyncClient, storage):
    response = await traveler_client.post("/api/posts", json=POST_BODY)
    assert response.status_code == 403
    assert response.json()["detail"] == "Only hosts and admins can create posts"
    assert await storage.posts.list() == []


@pytest.mark.asyncio
async def test_create_post_unauthenticated(client: AsyncClient):
    response = await client.post("/api/posts", json=POST_BODY)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_post_missing_title(host_client: AsyncClient):
    body = {k: v for k, v in POST_BODY.items() if k != "title"}
    response = await host_client.post("/api/posts", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "title is required"


@pytest.mark.asyncio
async def test_author_deletes_own_post(host_client: AsyncClient, storage):
    post = (await host_client.post("/api/posts", json=POST_BODY)).json()
    response = await host_client.delete(f"/api/posts/{post['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Post deleted successfully"
    assert await storage.posts.list() == []


@pytest.mark.asyncio
async def test_other_host_cannot_delete_post(host_client: AsyncClient, other_host_client: AsyncClient):
    post = (await host_client.post("/api/posts", json=POST_BODY)).json()
    response = await other_host_client.delete(f"/api/posts/{post['id']}")
    assert response.status_code == 403
    assert response.json()["detail"] == "Not authorized to delete this post"


@pytest.mark.asyncio
async def test_admin_deletes_any_post(host_client: AsyncClient, admin_client: AsyncClient):
    post = (await host_client.post("/api/posts", json=POST_BODY)).json()
    response = await admin_client.delete(f"/api/posts/{post['id']}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delete_missing_post(admin_client: AsyncClient):
    response = await admin_client.delete("/api/posts/42")
    assert response.status_code == 404
    assert response.json()["detail"] == "Post not found"
