from typing import Optional

from client import types
from client.actions.alert import report_error
from client.api import ApiError


def load_user():
    def thunk(store):
        store.api.set_auth_token(store.state["auth"]["token"])
        try:
            user = store.api.get("/api/auth")
        except ApiError as err:
            store.api.set_auth_token(None)
            report_error(store, err, types.AUTH_ERROR, with_alerts=False)
            return None
        store.dispatch({"type": types.USER_LOADED, "payload": user})
        return user

    return thunk


def _authenticate(path: str, body: dict, success: str, failure: str):
    def thunk(store):
        try:
            data = store.api.post(path, body)
        except ApiError as err:
            report_error(store, err, failure)
            return False
        store.dispatch({"type": success, "payload": data})
        store.dispatch(load_user())
        return True

    return thunk


def register(name: str, email: str, password: str):
    body = {"name": name, "email": email, "password": password}
    return _authenticate("/api/users", body, types.REGISTER_SUCCESS, types.REGISTER_FAIL)


def login(email: str, password: str):
    body = {"email": email, "password": password}
    return _authenticate("/api/auth", body, types.LOGIN_SUCCESS, types.LOGIN_FAIL)


def logout(history: Optional[object] = None):
    def thunk(store):
        store.api.set_auth_token(None)
        store.dispatch({"type": types.CLEAR_PROFILE})
        store.dispatch({"type": types.LOGOUT})
        if history is not None:
            history.push("/")

    return thunk
