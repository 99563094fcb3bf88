"""
Client-side action layer: HTTP calls against the API and the state
updates / notifications they produce.

    api = ApiClient("http://localhost:8000")
    store = create_store(api)
    store.dispatch(auth.login("me@example.com", "secret"))
    store.dispatch(profile.get_current_profile())
"""
from client.api import ApiClient, ApiError
from client.store import History, Store, create_store

__all__ = ["ApiClient", "ApiError", "History", "Store", "create_store"]
