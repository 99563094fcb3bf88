"""
Database Schemas for the developer network

Each Pydantic model represents a collection in MongoDB (or an entry
embedded in one). Collection name is the lowercase of the class name.
References to other documents are stored as the referenced ObjectId string.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, EmailStr, Field


def new_id() -> str:
    return str(ObjectId())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    name: str = Field(..., description="Full name")
    email: EmailStr = Field(..., description="Unique email, stored lower-cased")
    password_hash: str = Field(..., description="bcrypt hash")
    avatar: str = Field("", description="Gravatar URL")
    date: datetime = Field(default_factory=utcnow)


class Experience(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id, alias="_id")
    title: str
    company: str
    location: Optional[str] = None
    from_: str = Field(..., alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None


class Education(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id, alias="_id")
    school: str
    degree: str
    fieldofstudy: str
    from_: str = Field(..., alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None


class Profile(BaseModel):
    user: str = Field(..., description="User ObjectId as string")
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: str
    githubusername: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    social: Dict[str, str] = Field(default_factory=dict, description="platform -> url")
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    date: datetime = Field(default_factory=utcnow)


class Like(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id, alias="_id")
    user: str


class Comment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id, alias="_id")
    user: str
    text: str
    name: str = Field(..., description="Snapshot of the author's name")
    avatar: str = Field("", description="Snapshot of the author's avatar")
    date: datetime = Field(default_factory=utcnow)


class Post(BaseModel):
    user: str = Field(..., description="Owner ObjectId as string")
    text: str
    name: str = Field(..., description="Snapshot of the author's name")
    avatar: str = Field("", description="Snapshot of the author's avatar")
    likes: List[Like] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    date: datetime = Field(default_factory=utcnow)


def to_document(model: BaseModel) -> dict:
    """Dump a schema model as a MongoDB document (aliases applied, `_id` kept)."""
    return model.model_dump(by_alias=True)
