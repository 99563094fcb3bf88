# tests/test_posts_api.py
from datetime import datetime, timedelta, timezone

from bson import ObjectId
from fastapi import status

MISSING_ID = "5f1d7f1e2b3c4d5e6f7a8b9c"


def create_post(client, user, text="Hello world"):
    response = client.post("/api/posts", json={"text": text}, headers=user["headers"])
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()


class TestPosts:

    def test_create_snapshots_author(self, client, alice, db):
        post = create_post(client, alice)
        assert post["text"] == "Hello world"
        assert post["user"] == alice["id"]
        assert post["name"] == "Alice"
        assert post["likes"] == [] and post["comments"] == []

        # renaming the author later does not touch the post
        db["user"].update_one({"_id": ObjectId(alice["id"])}, {"$set": {"name": "Alicia"}})
        fetched = client.get(f"/api/posts/{post['id']}", headers=alice["headers"]).json()
        assert fetched["name"] == "Alice"

    def test_create_requires_text(self, client, alice):
        response = client.post("/api/posts", json={"text": "  "}, headers=alice["headers"])
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["msg"] == "Text is required"

    def test_posts_require_token(self, client):
        assert client.get("/api/posts").status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_newest_first(self, client, alice, db):
        first = create_post(client, alice, "first")
        second = create_post(client, alice, "second")
        now = datetime.now(timezone.utc)
        db["post"].update_one({"_id": ObjectId(first["id"])}, {"$set": {"date": now - timedelta(minutes=5)}})
        db["post"].update_one({"_id": ObjectId(second["id"])}, {"$set": {"date": now}})

        response = client.get("/api/posts", headers=alice["headers"])
        assert [p["text"] for p in response.json()] == ["second", "first"]

    def test_get_missing_and_malformed(self, client, alice):
        missing = client.get(f"/api/posts/{MISSING_ID}", headers=alice["headers"])
        malformed = client.get("/api/posts/not-an-id", headers=alice["headers"])
        assert missing.status_code == status.HTTP_404_NOT_FOUND
        assert malformed.status_code == status.HTTP_400_BAD_REQUEST
        assert malformed.json()["msg"] == "Incorrect post id"

    def test_owner_deletes_post(self, client, alice, db):
        post = create_post(client, alice)
        response = client.delete(f"/api/posts/{post['id']}", headers=alice["headers"])
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"msg": "Post removed"}
        assert db["post"].count_documents({}) == 0

    def test_non_owner_cannot_delete(self, client, alice, bob):
        post = create_post(client, alice)
        response = client.delete(f"/api/posts/{post['id']}", headers=bob["headers"])
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["msg"] == "User not authorized"

        after = client.get(f"/api/posts/{post['id']}", headers=alice["headers"])
        assert after.status_code == status.HTTP_200_OK
        assert after.json()["text"] == post["text"]

    def test_delete_missing_post(self, client, alice):
        response = client.delete(f"/api/posts/{MISSING_ID}", headers=alice["headers"])
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestLikes:

    def test_like_and_unlike(self, client, alice, bob):
        post = create_post(client, alice)
        client.put(f"/api/posts/like/{post['id']}", headers=alice["headers"])
        likes = client.put(f"/api/posts/like/{post['id']}", headers=bob["headers"]).json()
        assert [like["user"] for like in likes] == [bob["id"], alice["id"]]

        likes = client.put(f"/api/posts/unlike/{post['id']}", headers=bob["headers"]).json()
        assert [like["user"] for like in likes] == [alice["id"]]

    def test_double_like(self, client, alice):
        post = create_post(client, alice)
        first = client.put(f"/api/posts/like/{post['id']}", headers=alice["headers"]).json()
        second = client.put(f"/api/posts/like/{post['id']}", headers=alice["headers"])

        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()["msg"] == "Post is already liked"
        stored = client.get(f"/api/posts/{post['id']}", headers=alice["headers"]).json()
        assert stored["likes"] == first

    def test_unlike_never_liked(self, client, alice, bob):
        post = create_post(client, alice)
        client.put(f"/api/posts/like/{post['id']}", headers=alice["headers"])
        response = client.put(f"/api/posts/unlike/{post['id']}", headers=bob["headers"])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["msg"] == "Post has not been liked"
        stored = client.get(f"/api/posts/{post['id']}", headers=alice["headers"]).json()
        assert [like["user"] for like in stored["likes"]] == [alice["id"]]

    def test_like_missing_post(self, client, alice):
        response = client.put(f"/api/posts/like/{MISSING_ID}", headers=alice["headers"])
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestComments:

    def test_comment_is_prepended_with_snapshot(self, client, alice, bob):
        post = create_post(client, alice)
        client.post(f"/api/posts/comment/{post['id']}", json={"text": "one"}, headers=alice["headers"])
        comments = client.post(
            f"/api/posts/comment/{post['id']}", json={"text": "two"}, headers=bob["headers"]
        ).json()

        assert [c["text"] for c in comments] == ["two", "one"]
        assert comments[0]["name"] == "Bob"
        assert comments[0]["user"] == bob["id"]
        assert comments[0]["id"] != comments[1]["id"]

    def test_comment_requires_text(self, client, alice):
        post = create_post(client, alice)
        response = client.post(f"/api/posts/comment/{post['id']}", json={}, headers=alice["headers"])
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_comment_on_missing_post(self, client, alice):
        response = client.post(f"/api/posts/comment/{MISSING_ID}", json={"text": "hi"}, headers=alice["headers"])
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_author_deletes_comment(self, client, alice, bob):
        post = create_post(client, alice)
        url = f"/api/posts/comment/{post['id']}"
        client.post(url, json={"text": "one"}, headers=alice["headers"])
        client.post(url, json={"text": "two"}, headers=bob["headers"])
        comments = client.post(url, json={"text": "three"}, headers=alice["headers"]).json()

        target = comments[1]
        response = client.delete(f"{url}/{target['id']}", headers=bob["headers"])
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [comments[0], comments[2]]

    def test_other_user_cannot_delete_comment(self, client, alice, bob):
        post = create_post(client, alice)
        comments = client.post(
            f"/api/posts/comment/{post['id']}", json={"text": "mine"}, headers=bob["headers"]
        ).json()
        response = client.delete(f"/api/posts/comment/{post['id']}/{comments[0]['id']}", headers=alice["headers"])
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["msg"] == "Not authorized to delete this comment"

    def test_delete_missing_comment(self, client, alice):
        post = create_post(client, alice)
        response = client.delete(f"/api/posts/comment/{post['id']}/nope", headers=alice["headers"])
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["msg"] == "Comment does not exist"


class TestMalformedIds:

    def test_like_malformed_id(self, client, alice):
        response = client.put("/api/posts/like/not-an-id", headers=alice["headers"])
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["msg"] == "Incorrect post id"

    def test_unlike_malformed_id(self, client, alice):
        response = client.put("/api/posts/unlike/not-an-id", headers=alice["headers"])
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["msg"] == "Incorrect post id"

    def test_delete_malformed_id(self, client, alice):
        response = client.delete("/api/posts/not-an-id", headers=alice["headers"])
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["msg"] == "Incorrect post id"

    def test_comment_malformed_id(self, client, alice):
        response = client.post("/api/posts/comment/not-an-id", json={"text": "hi"}, headers=alice["headers"])
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["msg"] == "Incorrect post id"

    def test_delete_comment_on_missing_post(self, client, alice):
        response = client.delete(f"/api/posts/comment/{MISSING_ID}/abc", headers=alice["headers"])
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["msg"] == "Post not found"
