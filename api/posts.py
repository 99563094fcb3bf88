from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pymongo.database import Database

from database import get_db
from security import get_current_user_id
from stores import posts

router = APIRouter(prefix="/api/posts", tags=["posts"], dependencies=[Depends(get_current_user_id)])


class TextBody(BaseModel):
    text: Optional[str] = None


@router.post("")
def create_post(payload: TextBody, user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return posts.create_post(db, user_id, payload.text)


@router.get("")
def list_posts(db: Database = Depends(get_db)):
    return posts.list_posts(db)


@router.get("/{post_id}")
def get_post(post_id: str, db: Database = Depends(get_db)):
    return posts.get_post(db, post_id)


@router.delete("/{post_id}")
def delete_post(post_id: str, user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    posts.delete_post(db, user_id, post_id)
    return {"msg": "Post removed"}


@router.put("/like/{post_id}")
def like_post(post_id: str, user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return posts.like_post(db, user_id, post_id)


@router.put("/unlike/{post_id}")
def unlike_post(post_id: str, user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return posts.unlike_post(db, user_id, post_id)


@router.post("/comment/{post_id}")
def add_comment(
    post_id: str,
    payload: TextBody,
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    return posts.add_comment(db, user_id, post_id, payload.text)


@router.delete("/comment/{post_id}/{comment_id}")
def delete_comment(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    return posts.delete_comment(db, user_id, post_id, comment_id)
