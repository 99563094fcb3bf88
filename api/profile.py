from typing import List, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from pymongo.database import Database

from database import get_db
from security import get_current_user_id
from stores import profiles
from stores.users import delete_account

router = APIRouter(prefix="/api/profile", tags=["profile"])

# ------------------------------
# Models for requests
# ------------------------------

class ProfileUpsert(BaseModel):
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: Optional[Union[str, List[str]]] = Field(None, description="Comma separated list")
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None


class EducationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None

# ------------------------------
# Routes
# ------------------------------

@router.get("/me")
def get_my_profile(user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return profiles.get_own_profile(db, user_id)


@router.get("")
def get_all_profiles(db: Database = Depends(get_db)):
    return profiles.list_profiles(db)


@router.get("/user/{user_id}")
def get_profile_by_user(user_id: str, db: Database = Depends(get_db)):
    return profiles.get_profile_by_user(db, user_id)


@router.post("")
def create_or_update_profile(
    payload: ProfileUpsert,
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    return profiles.upsert_profile(db, user_id, payload.model_dump())


@router.delete("")
def delete_user_and_profile(user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    delete_account(db, user_id)
    return {"msg": "User deleted"}


@router.put("/experience")
def add_experience(
    payload: ExperienceCreate,
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    return profiles.add_experience(db, user_id, payload.model_dump(by_alias=True))


@router.delete("/experience/{exp_id}")
def remove_experience(exp_id: str, user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return profiles.remove_experience(db, user_id, exp_id)


@router.put("/education")
def add_education(
    payload: EducationCreate,
    user_id: str = Depends(get_current_user_id),
    db: Database = Depends(get_db),
):
    return profiles.add_education(db, user_id, payload.model_dump(by_alias=True))


@router.delete("/education/{edu_id}")
def remove_education(edu_id: str, user_id: str = Depends(get_current_user_id), db: Database = Depends(get_db)):
    return profiles.remove_education(db, user_id, edu_id)
