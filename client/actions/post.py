from client import types
from client.actions.alert import report_error, set_alert
from client.api import ApiError


def _call(method: str, path: str, on_success, json=None, message=None, with_alerts=False):
    def thunk(store):
        try:
            data = store.api.request(method, path, json=json)
        except ApiError as err:
            report_error(store, err, types.POST_ERROR, with_alerts=with_alerts)
            return None
        store.dispatch(on_success(data))
        if message:
            store.dispatch(set_alert(message, "success"))
        return data

    return thunk


def get_posts():
    return _call("GET", "/api/posts", lambda data: {"type": types.GET_POSTS, "payload": data})


def get_post(post_id: str):
    return _call("GET", f"/api/posts/{post_id}", lambda data: {"type": types.GET_POST, "payload": data})


def add_post(form_data: dict):
    return _call("POST", "/api/posts", lambda data: {"type": types.ADD_POST, "payload": data},
                 json=form_data, message="Post created", with_alerts=True)


def delete_post(post_id: str):
    return _call("DELETE", f"/api/posts/{post_id}", lambda data: {"type": types.DELETE_POST, "payload": post_id},
                 message="Post removed")


def add_like(post_id: str):
    return _call("PUT", f"/api/posts/like/{post_id}",
                 lambda likes: {"type": types.UPDATE_LIKES, "payload": {"id": post_id, "likes": likes}})


def remove_like(post_id: str):
    return _call("PUT", f"/api/posts/unlike/{post_id}",
                 lambda likes: {"type": types.UPDATE_LIKES, "payload": {"id": post_id, "likes": likes}})


def add_comment(post_id: str, form_data: dict):
    return _call("POST", f"/api/posts/comment/{post_id}", lambda data: {"type": types.ADD_COMMENT, "payload": data},
                 json=form_data, message="Comment added", with_alerts=True)


def delete_comment(post_id: str, comment_id: str):
    return _call("DELETE", f"/api/posts/comment/{post_id}/{comment_id}",
                 lambda data: {"type": types.REMOVE_COMMENT, "payload": comment_id},
                 message="Comment removed")
