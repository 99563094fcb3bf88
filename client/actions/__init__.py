from client.actions import alert, auth, post, profile

__all__ = ["alert", "auth", "post", "profile"]
