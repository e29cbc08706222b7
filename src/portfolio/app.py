from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from portfolio.config import Config
from portfolio.core.core import Core
from portfolio.core.modules.blog.models import Blog, BlogCreate, BlogUpdate
from portfolio.core.modules.contact.models import ContactMessage
from portfolio.core.modules.session.models import AuthToken
from portfolio.core.modules.user.models import UserView
from portfolio.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class App:
    """Facade for all application operations, validates sessions before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    # === Auth ===
    async def login(self, username: str, password: str) -> tuple[AuthToken, UserView]:
        """Authenticate user and create session."""
        user = self._core.services.user.verify_password(username, password)
        if user is None:
            logger.info("login_failed", username=username)
            raise AuthenticationError("Invalid credentials")
        session = self._core.services.session.create_session(user.id)
        logger.info("login_succeeded", user_id=user.id)
        return session.id, UserView.from_domain(user)

    async def logout(self, auth_token: AuthToken) -> None:
        """Invalidate user session."""
        self._core.services.access.ensure_authenticated(auth_token)
        self._core.services.session.invalidate_session(auth_token)

    async def get_current_user(self, auth_token: AuthToken | None) -> UserView:
        """Get current authenticated user."""
        current_user = self._core.services.access.ensure_authenticated(auth_token)
        return UserView.from_domain(current_user)

    # === Public blog ===
    async def get_published_blogs(self) -> list[Blog]:
        return self._core.services.blog.list_published()

    async def get_published_blog(self, blog_id: int) -> Blog:
        return self._core.services.blog.get_published(blog_id)

    async def get_published_blog_by_slug(self, slug: str) -> Blog:
        return self._core.services.blog.get_published_by_slug(slug)

    # === Admin blog ===
    async def get_all_blogs(self, auth_token: AuthToken) -> list[Blog]:
        """Get all blogs including drafts (requires authentication)."""
        self._core.services.access.ensure_authenticated(auth_token)
        return self._core.services.blog.list_all()

    async def get_blog(self, auth_token: AuthToken, blog_id: int) -> Blog:
        """Get any blog by id, drafts included (requires authentication)."""
        self._core.services.access.ensure_authenticated(auth_token)
        return self._core.services.blog.get_blog(blog_id)

    async def create_blog(self, auth_token: AuthToken, payload: BlogCreate) -> Blog:
        """Create a blog post (requires authentication)."""
        current_user = self._core.services.access.ensure_authenticated(auth_token)
        blog = self._core.services.blog.create_blog(payload)
        logger.info("blog_created", blog_id=blog.id, slug=blog.slug, username=current_user.username)
        return blog

    async def update_blog(self, auth_token: AuthToken, blog_id: int, payload: BlogUpdate) -> Blog:
        """Update blog fields (partial update, requires authentication)."""
        current_user = self._core.services.access.ensure_authenticated(auth_token)
        blog = self._core.services.blog.update_blog(blog_id, payload)
        logger.info("blog_updated", blog_id=blog_id, fields=sorted(payload.changes()), username=current_user.username)
        return blog

    async def delete_blog(self, auth_token: AuthToken, blog_id: int) -> None:
        """Delete a blog post (requires authentication)."""
        current_user = self._core.services.access.ensure_authenticated(auth_token)
        self._core.services.blog.delete_blog(blog_id)
        logger.info("blog_deleted", blog_id=blog_id, username=current_user.username)

    # === Contact ===
    async def submit_contact_message(self, message: ContactMessage) -> None:
        self._core.services.contact.submit(message)
