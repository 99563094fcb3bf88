import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database

from database import to_object_id
from errors import NotFound, require
from schemas import Education, Experience, Profile, to_document

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

NO_PROFILE = "There is no profile for this user"

# ------------------------------
# Serialization
# ------------------------------

def serialize_entry(entry: dict) -> dict:
    out = {k: v for k, v in entry.items() if k != "_id"}
    return {"id": str(entry.get("_id")), **out}


def serialize_profile(doc: dict, user_doc: Optional[dict] = None) -> dict:
    if user_doc:
        user = {"id": str(user_doc["_id"]), "name": user_doc.get("name"), "avatar": user_doc.get("avatar")}
    else:
        user = {"id": doc.get("user"), "name": None, "avatar": None}
    return {
        "id": str(doc.get("_id")),
        "user": user,
        **{f: doc.get(f) for f in PROFILE_FIELDS},
        "skills": list(doc.get("skills") or []),
        "social": dict(doc.get("social") or {}),
        "experience": [serialize_entry(e) for e in doc.get("experience") or []],
        "education": [serialize_entry(e) for e in doc.get("education") or []],
        "date": doc.get("date"),
    }


def _users_by_id(db: Database, user_ids: Iterable[str]) -> Dict[str, dict]:
    oids = [ObjectId(u) for u in set(user_ids) if ObjectId.is_valid(u)]
    if not oids:
        return {}
    projection = {"name": 1, "avatar": 1}
    return {str(u["_id"]): u for u in db["user"].find({"_id": {"$in": oids}}, projection)}


def _with_user(db: Database, doc: dict) -> dict:
    users = _users_by_id(db, [doc.get("user")])
    return serialize_profile(doc, users.get(doc.get("user")))

# ------------------------------
# Reads
# ------------------------------

def get_own_profile(db: Database, user_id: str) -> dict:
    doc = db["profile"].find_one({"user": user_id})
    if not doc:
        raise NotFound(NO_PROFILE)
    return _with_user(db, doc)


def get_profile_by_user(db: Database, user_id: str) -> dict:
    to_object_id(user_id, "Profile not found")
    return get_own_profile(db, user_id)


def list_profiles(db: Database) -> List[dict]:
    docs = list(db["profile"].find())
    users = _users_by_id(db, [d.get("user") for d in docs])
    return [serialize_profile(d, users.get(d.get("user"))) for d in docs]

# ------------------------------
# Create / update
# ------------------------------

def split_skills(skills: Union[str, List[str]]) -> List[str]:
    """'a, b,c' -> ['a', 'b', 'c']; empty items are dropped."""
    items = skills.split(",") if isinstance(skills, str) else skills
    return [s.strip() for s in items if s and s.strip()]


def upsert_profile(db: Database, user_id: str, payload: Dict[str, Any]) -> dict:
    """
    Create the caller's profile, or update it in place.

    On update only the fields present (and non-empty) in `payload` are
    written; a provided `skills` value replaces the whole list and each
    provided social link is merged into the existing `social` map.
    """
    skills = split_skills(payload.get("skills") or [])
    require({**payload, "skills": skills}, {"status": "Status is required", "skills": "Skills are required"})

    updates: Dict[str, Any] = {f: payload[f] for f in PROFILE_FIELDS if payload.get(f)}
    updates["skills"] = skills
    social = {p: payload[p] for p in SOCIAL_FIELDS if payload.get(p)}
    for platform, url in social.items():
        updates[f"social.{platform}"] = url

    defaults = to_document(Profile(user=user_id, status=updates["status"], skills=updates["skills"]))
    on_insert = {
        k: v for k, v in defaults.items()
        if k not in updates and k != "user" and not (k == "social" and social)
    }

    doc = db["profile"].find_one_and_update(
        {"user": user_id},
        {"$set": updates, "$setOnInsert": on_insert},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    logger.info("Saved profile for user %s", user_id)
    return _with_user(db, doc)

# ------------------------------
# Experience / education
# ------------------------------

def _push_entry(db: Database, user_id: str, field: str, entry: dict) -> dict:
    doc = db["profile"].find_one_and_update(
        {"user": user_id},
        {"$push": {field: {"$each": [entry], "$position": 0}}},
        return_document=ReturnDocument.AFTER,
    )
    if not doc:
        raise NotFound(NO_PROFILE)
    return _with_user(db, doc)


def _pull_entry(db: Database, user_id: str, field: str, entry_id: str, label: str) -> dict:
    doc = db["profile"].find_one_and_update(
        {"user": user_id, f"{field}._id": entry_id},
        {"$pull": {field: {"_id": entry_id}}},
        return_document=ReturnDocument.AFTER,
    )
    if doc:
        return _with_user(db, doc)
    if db["profile"].find_one({"user": user_id}, {"_id": 1}) is None:
        raise NotFound(NO_PROFILE)
    raise NotFound(f"This {label} does not exist")


def add_experience(db: Database, user_id: str, payload: Dict[str, Any]) -> dict:
    require(payload, {
        "title": "Title is required",
        "company": "Company is required",
        "from": "From is required",
    })
    entry = to_document(Experience.model_validate(payload))
    return _push_entry(db, user_id, "experience", entry)


def remove_experience(db: Database, user_id: str, exp_id: str) -> dict:
    return _pull_entry(db, user_id, "experience", exp_id, "experience")


def add_education(db: Database, user_id: str, payload: Dict[str, Any]) -> dict:
    require(payload, {
        "school": "School is required",
        "degree": "Degree is required",
        "fieldofstudy": "Field of study is required",
        "from": "From is required",
    })
    entry = to_document(Education.model_validate(payload))
    return _push_entry(db, user_id, "education", entry)


def remove_education(db: Database, user_id: str, edu_id: str) -> dict:
    return _pull_entry(db, user_id, "education", edu_id, "education")
