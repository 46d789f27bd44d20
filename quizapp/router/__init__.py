from quizapp.router.api.auth import router as auth_router
from quizapp.router.api.users import router as users_router
from quizapp.router.api.admin import router as admin_router
__all__ = [
    "auth_router",
    "users_router",
    "admin_router",
]
