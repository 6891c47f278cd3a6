"""Post Routes: feed CRUD, comments and author-only edits."""


async def test_post_lifecycle(client, alice, bob):
    created = await client.post(
        "/api/v1/posts", json={"title": "Week 1", "content": "20 km done"},
        headers={"X-User-Id": alice.id},
    )
    assert created.status_code == 201
    post = created.json()
    assert post["slug"].startswith("week-1-")

    assert (await client.get(f"/api/v1/posts/slug/{post['slug']}")).json()["id"] == post["id"]

    forbidden = await client.patch(
        f"/api/v1/posts/{post['id']}", json={"content": "x"},
        headers={"X-User-Id": bob.id},
    )
    assert forbidden.status_code == 403

    listed = await client.get("/api/v1/posts")
    assert [p["id"] for p in listed.json()["posts"]] == [post["id"]]

    deleted = await client.delete(
        f"/api/v1/posts/{post['id']}", headers={"X-User-Id": alice.id},
    )
    assert deleted.status_code == 204


async def test_blank_title_is_400(client, alice):
    res = await client.post(
        "/api/v1/posts", json={"title": "   ", "content": "body"},
        headers={"X-User-Id": alice.id},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_comment_flow(client, post_service, alice, bob):
    post = await post_service.create_post(alice.id, "Hello", "World")

    res = await client.post(
        f"/api/v1/posts/{post.id}/comments", json={"content": "Nice!"},
        headers={"X-User-Id": bob.id},
    )
    assert res.status_code == 201
    comment = res.json()

    listed = await client.get(f"/api/v1/posts/{post.id}/comments")
    assert [c["id"] for c in listed.json()] == [comment["id"]]

    edited = await client.patch(
        f"/api/v1/posts/comments/{comment['id']}", json={"content": "Very nice!"},
        headers={"X-User-Id": bob.id},
    )
    assert edited.json()["content"] == "Very nice!"

    denied = await client.delete(
        f"/api/v1/posts/comments/{comment['id']}", headers={"X-User-Id": alice.id},
    )
    assert denied.status_code == 403
