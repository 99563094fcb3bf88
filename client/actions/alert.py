import uuid

from client import types

DEFAULT_TIMEOUT_MS = 5000


def set_alert(msg: str, alert_type: str = "success", timeout: int = DEFAULT_TIMEOUT_MS):
    """Show a notification and schedule its removal after `timeout` ms."""

    def thunk(store):
        alert_id = str(uuid.uuid4())
        store.dispatch({"type": types.SET_ALERT, "payload": {"id": alert_id, "msg": msg, "alert_type": alert_type}})
        store.schedule(timeout / 1000.0, lambda: store.dispatch({"type": types.REMOVE_ALERT, "payload": alert_id}))
        return alert_id

    return thunk


def report_error(store, err, error_type: str, with_alerts: bool = True) -> None:
    """One danger alert per validation message, then the slice's error action."""
    if with_alerts:
        for error in err.errors or []:
            store.dispatch(set_alert(error.get("msg"), "danger"))
    store.dispatch({"type": error_type, "payload": {"msg": err.status_text, "status": err.status}})
