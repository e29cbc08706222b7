from portfolio.web.routers.admin import router as admin_router
from portfolio.web.routers.auth import router as auth_router
from portfolio.web.routers.blogs import router as blogs_router
from portfolio.web.routers.contact import router as contact_router

__all__ = [
    "admin_router",
    "auth_router",
    "blogs_router",
    "contact_router",
]
