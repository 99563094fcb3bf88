from api.auth import router as auth_router
from api.posts import router as posts_router
from api.profile import router as profile_router
from api.users import router as users_router

routers = [auth_router, users_router, profile_router, posts_router]
