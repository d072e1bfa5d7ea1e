from .groups import groups_router
from .machines import machines_router
from .user_invites import user_invites_router
from .users import users_router

__all__ = ["groups_router", "machines_router", "user_invites_router", "users_router"]
