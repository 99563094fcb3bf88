import logging
from typing import List

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database

from database import to_object_id
from errors import AlreadyLiked, Forbidden, NotFound, NotLiked, require
from schemas import Comment, Like, Post, to_document
from stores.profiles import serialize_entry
from stores.users import find_user

logger = logging.getLogger(__name__)


def serialize_post(doc: dict) -> dict:
    return {
        "id": str(doc.get("_id")),
        "user": doc.get("user"),
        "text": doc.get("text"),
        "name": doc.get("name"),
        "avatar": doc.get("avatar"),
        "likes": serialize_likes(doc),
        "comments": serialize_comments(doc),
        "date": doc.get("date"),
    }


def serialize_likes(doc: dict) -> List[dict]:
    return [serialize_entry(like) for like in doc.get("likes") or []]


def serialize_comments(doc: dict) -> List[dict]:
    return [serialize_entry(c) for c in doc.get("comments") or []]


def _author(db: Database, user_id: str) -> dict:
    user = find_user(db, user_id)
    if not user:
        raise NotFound("User not found")
    return user


def _find_post(db: Database, post_id: str) -> dict:
    oid = to_object_id(post_id, "Incorrect post id")
    doc = db["post"].find_one({"_id": oid})
    if not doc:
        raise NotFound("Post not found")
    return doc

# ------------------------------
# Posts
# ------------------------------

def create_post(db: Database, user_id: str, text: str) -> dict:
    require({"text": text}, {"text": "Text is required"})
    user = _author(db, user_id)
    post = Post(user=user_id, text=text, name=user.get("name", ""), avatar=user.get("avatar", ""))
    doc = to_document(post)
    doc["_id"] = db["post"].insert_one(doc).inserted_id
    logger.info("User %s created post %s", user_id, doc["_id"])
    return serialize_post(doc)


def list_posts(db: Database) -> List[dict]:
    return [serialize_post(d) for d in db["post"].find().sort("date", DESCENDING)]


def get_post(db: Database, post_id: str) -> dict:
    return serialize_post(_find_post(db, post_id))


def delete_post(db: Database, user_id: str, post_id: str) -> None:
    doc = _find_post(db, post_id)
    if doc.get("user") != user_id:
        raise Forbidden("User not authorized")
    db["post"].delete_one({"_id": doc["_id"], "user": user_id})
    logger.info("User %s removed post %s", user_id, doc["_id"])

# ------------------------------
# Likes
# ------------------------------

def like_post(db: Database, user_id: str, post_id: str) -> List[dict]:
    oid = to_object_id(post_id, "Incorrect post id")
    like = to_document(Like(user=user_id))
    doc = db["post"].find_one_and_update(
        {"_id": oid, "likes.user": {"$ne": user_id}},
        {"$push": {"likes": {"$each": [like], "$position": 0}}},
        return_document=ReturnDocument.AFTER,
    )
    if doc:
        return serialize_likes(doc)
    _find_post(db, post_id)
    raise AlreadyLiked()


def unlike_post(db: Database, user_id: str, post_id: str) -> List[dict]:
    oid = to_object_id(post_id, "Incorrect post id")
    doc = db["post"].find_one_and_update(
        {"_id": oid, "likes.user": user_id},
        {"$pull": {"likes": {"user": user_id}}},
        return_document=ReturnDocument.AFTER,
    )
    if doc:
        return serialize_likes(doc)
    _find_post(db, post_id)
    raise NotLiked()

# ------------------------------
# Comments
# ------------------------------

def add_comment(db: Database, user_id: str, post_id: str, text: str) -> List[dict]:
    require({"text": text}, {"text": "Text is required"})
    oid = to_object_id(post_id, "Incorrect post id")
    user = _author(db, user_id)
    comment = Comment(user=user_id, text=text, name=user.get("name", ""), avatar=user.get("avatar", ""))
    doc = db["post"].find_one_and_update(
        {"_id": oid},
        {"$push": {"comments": {"$each": [to_document(comment)], "$position": 0}}},
        return_document=ReturnDocument.AFTER,
    )
    if not doc:
        raise NotFound("Post not found")
    return serialize_comments(doc)


def delete_comment(db: Database, user_id: str, post_id: str, comment_id: str) -> List[dict]:
    doc = _find_post(db, post_id)
    comment = next((c for c in doc.get("comments") or [] if c.get("_id") == comment_id), None)
    if comment is None:
        raise NotFound("Comment does not exist")
    if comment.get("user") != user_id:
        raise Forbidden("Not authorized to delete this comment")

    doc = db["post"].find_one_and_update(
        {"_id": doc["_id"]},
        {"$pull": {"comments": {"_id": comment_id, "user": user_id}}},
        return_document=ReturnDocument.AFTER,
    )
    if not doc:
        raise NotFound("Post not found")
    return serialize_comments(doc)
