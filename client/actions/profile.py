from typing import Callable, Optional

from client import types
from client.actions.alert import report_error, set_alert
from client.api import ApiError

CONFIRM_DELETE = "Are you sure? This can NOT be undone!"


def _fetch(path: str, success: str):
    def thunk(store):
        try:
            data = store.api.get(path)
        except ApiError as err:
            report_error(store, err, types.PROFILE_ERROR, with_alerts=False)
            return None
        store.dispatch({"type": success, "payload": data})
        return data

    return thunk


def get_current_profile():
    return _fetch("/api/profile/me", types.GET_PROFILE)


def get_profiles():
    def thunk(store):
        store.dispatch({"type": types.CLEAR_PROFILE})
        return store.dispatch(_fetch("/api/profile", types.GET_PROFILES))

    return thunk


def get_profile_by_id(user_id: str):
    return _fetch(f"/api/profile/user/{user_id}", types.GET_PROFILE)


def _submit(method: str, path: str, form_data: dict, success: str, message: str, history=None, redirect: Optional[str] = None):
    def thunk(store):
        try:
            data = store.api.request(method, path, json=form_data)
        except ApiError as err:
            report_error(store, err, types.PROFILE_ERROR)
            return None
        store.dispatch({"type": success, "payload": data})
        store.dispatch(set_alert(message, "success"))
        if history is not None and redirect:
            history.push(redirect)
        return data

    return thunk


def create_profile(form_data: dict, history=None, edit: bool = False):
    """Create or update the caller's profile; only a fresh profile navigates to the dashboard."""
    message = "Profile updated" if edit else "Profile created"
    redirect = None if edit else "/dashboard"
    return _submit("POST", "/api/profile", form_data, types.GET_PROFILE, message, history, redirect)


def add_experience(form_data: dict, history=None):
    return _submit("PUT", "/api/profile/experience", form_data, types.UPDATE_PROFILE,
                   "Experiences updated", history, "/dashboard")


def add_education(form_data: dict, history=None):
    return _submit("PUT", "/api/profile/education", form_data, types.UPDATE_PROFILE,
                   "Education updated", history, "/dashboard")


def _remove(path: str, message: str):
    def thunk(store):
        try:
            data = store.api.delete(path)
        except ApiError as err:
            report_error(store, err, types.PROFILE_ERROR, with_alerts=False)
            return None
        store.dispatch({"type": types.UPDATE_PROFILE, "payload": data})
        store.dispatch(set_alert(message, "success"))
        return data

    return thunk


def delete_experience(exp_id: str):
    return _remove(f"/api/profile/experience/{exp_id}", "Experience removed")


def delete_education(edu_id: str):
    return _remove(f"/api/profile/education/{edu_id}", "Education removed")


def delete_account(confirm: Callable[[str], bool]):
    """Delete the caller's user and profile, after `confirm` agrees."""

    def thunk(store):
        if not confirm(CONFIRM_DELETE):
            return False
        try:
            store.api.delete("/api/profile")
        except ApiError as err:
            report_error(store, err, types.PROFILE_ERROR, with_alerts=False)
            return False
        store.api.set_auth_token(None)
        store.dispatch({"type": types.CLEAR_PROFILE})
        store.dispatch({"type": types.ACCOUNT_DELETED})
        store.dispatch(set_alert("Your account has been permanently deleted"))
        return True

    return thunk
