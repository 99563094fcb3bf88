"""
State reducers. Each takes the current slice and an action dict
({"type": ..., "payload": ...}) and returns the next slice without
mutating the old one.
"""
from client import types


def alert(state=None, action=None):
    state = [] if state is None else state
    kind, payload = action.get("type"), action.get("payload")
    if kind == types.SET_ALERT:
        return [*state, payload]
    if kind == types.REMOVE_ALERT:
        return [a for a in state if a["id"] != payload]
    return state


AUTH_INITIAL = {"token": None, "is_authenticated": None, "loading": True, "user": None, "error": {}}


def auth(state=None, action=None):
    state = dict(AUTH_INITIAL) if state is None else state
    kind, payload = action.get("type"), action.get("payload")
    if kind == types.USER_LOADED:
        return {**state, "is_authenticated": True, "loading": False, "user": payload}
    if kind in (types.REGISTER_SUCCESS, types.LOGIN_SUCCESS):
        return {**state, "token": payload["token"], "is_authenticated": True, "loading": False, "error": {}}
    if kind in (types.REGISTER_FAIL, types.AUTH_ERROR, types.LOGIN_FAIL):
        return {**state, "token": None, "is_authenticated": False, "loading": False, "user": None,
                "error": payload or {}}
    if kind in (types.LOGOUT, types.ACCOUNT_DELETED):
        return {**state, "token": None, "is_authenticated": False, "loading": False, "user": None}
    return state


PROFILE_INITIAL = {"profile": None, "profiles": [], "loading": True, "error": {}}


def profile(state=None, action=None):
    state = dict(PROFILE_INITIAL) if state is None else state
    kind, payload = action.get("type"), action.get("payload")
    if kind in (types.GET_PROFILE, types.UPDATE_PROFILE):
        return {**state, "profile": payload, "loading": False}
    if kind == types.GET_PROFILES:
        return {**state, "profiles": payload, "loading": False}
    if kind == types.PROFILE_ERROR:
        return {**state, "error": payload, "loading": False, "profile": None}
    if kind == types.CLEAR_PROFILE:
        return {**state, "profile": None, "loading": False}
    return state


POST_INITIAL = {"posts": [], "post": None, "loading": True, "error": {}}


def post(state=None, action=None):
    state = dict(POST_INITIAL) if state is None else state
    kind, payload = action.get("type"), action.get("payload")
    if kind == types.GET_POSTS:
        return {**state, "posts": payload, "loading": False}
    if kind == types.GET_POST:
        return {**state, "post": payload, "loading": False}
    if kind == types.ADD_POST:
        return {**state, "posts": [payload, *state["posts"]], "loading": False}
    if kind == types.DELETE_POST:
        return {**state, "posts": [p for p in state["posts"] if p["id"] != payload], "loading": False}
    if kind == types.POST_ERROR:
        return {**state, "error": payload, "loading": False}
    if kind == types.UPDATE_LIKES:
        posts = [
            {**p, "likes": payload["likes"]} if p["id"] == payload["id"] else p
            for p in state["posts"]
        ]
        current = state["post"]
        if current and current["id"] == payload["id"]:
            current = {**current, "likes": payload["likes"]}
        return {**state, "posts": posts, "post": current, "loading": False}
    if kind == types.ADD_COMMENT:
        current = {**state["post"], "comments": payload} if state["post"] else None
        return {**state, "post": current, "loading": False}
    if kind == types.REMOVE_COMMENT:
        current = state["post"]
        if current:
            current = {**current, "comments": [c for c in current["comments"] if c["id"] != payload]}
        return {**state, "post": current, "loading": False}
    return state


ROOT = {"alert": alert, "auth": auth, "profile": profile, "post": post}
