"""In-memory entity store for users, sessions and blog posts.

The store lives for the process lifetime and is never persisted. One
instance is built by ``Core`` and shared by reference with every service.
"""

import threading
from typing import Any

from portfolio.core.modules.blog.models import Blog, BlogCreate
from portfolio.core.modules.session.models import AuthToken, Session
from portfolio.core.modules.user.models import User
from portfolio.errors import ConflictError, InternalError, NotFoundError


class MemoryStore:
    """Identifier-to-entity maps with monotonic ids and unique keys.

    Every mutation checks its preconditions before writing, so a failed call
    leaves the store untouched. A single lock makes id assignment and insert
    atomic and guards the scans over the maps when handlers run on more than
    one thread. The ``_find_*`` helpers expect the caller to hold it.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._sessions: dict[AuthToken, Session] = {}
        self._blogs: dict[int, Blog] = {}
        self._last_user_id = 0
        self._last_blog_id = 0
        self._lock = threading.Lock()

    # === Users ===
    def create_user(self, username: str, password_hash: str) -> User:
        with self._lock:
            if self._find_user(username) is not None:
                raise ConflictError(f"User '{username}' already exists")
            self._last_user_id += 1
            if self._last_user_id in self._users:
                raise InternalError(f"User id {self._last_user_id} already assigned")
            user = User(id=self._last_user_id, username=username, password_hash=password_hash)
            self._users[user.id] = user
            return user

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._find_user(username)

    def count_users(self) -> int:
        return len(self._users)

    def _find_user(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    # === Sessions ===
    def add_session(self, session: Session) -> None:
        with self._lock:
            if session.id in self._sessions:
                raise InternalError("Session token collision")
            self._sessions[session.id] = session

    def get_session(self, token: AuthToken) -> Session | None:
        return self._sessions.get(token)

    def delete_session(self, token: AuthToken) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None

    # === Blogs ===
    def create_blog(self, candidate: BlogCreate) -> Blog:
        """Insert a validated blog, filling in optional fields."""
        with self._lock:
            if self._find_blog_by_slug(candidate.slug) is not None:
                raise ConflictError(f"Blog with slug '{candidate.slug}' already exists")
            self._last_blog_id += 1
            if self._last_blog_id in self._blogs:
                raise InternalError(f"Blog id {self._last_blog_id} already assigned")
            data = candidate.model_dump()
            data["tags"] = data["tags"] or []
            data["featured"] = bool(data["featured"])
            data["is_draft"] = bool(data["is_draft"])
            blog = Blog(id=self._last_blog_id, **data)
            self._blogs[blog.id] = blog
            return blog

    def get_blog(self, blog_id: int) -> Blog | None:
        return self._blogs.get(blog_id)

    def get_blog_by_slug(self, slug: str) -> Blog | None:
        with self._lock:
            return self._find_blog_by_slug(slug)

    def list_blogs(self, include_drafts: bool) -> list[Blog]:
        """Blogs newest first; equal timestamps put the higher id first."""
        with self._lock:
            blogs = [blog for blog in self._blogs.values() if include_drafts or not blog.is_draft]
        return sorted(blogs, key=lambda blog: (blog.published_at, blog.id), reverse=True)

    def update_blog(self, blog_id: int, changes: dict[str, Any]) -> Blog:
        """Merge the given fields into an existing blog, leaving the rest as they are."""
        with self._lock:
            existing = self._blogs.get(blog_id)
            if existing is None:
                raise NotFoundError(f"Blog '{blog_id}' not found")
            if "slug" in changes:
                other = self._find_blog_by_slug(changes["slug"])
                if other is not None and other.id != blog_id:
                    raise ConflictError(f"Blog with slug '{changes['slug']}' already exists")
            if "tags" in changes and changes["tags"] is None:
                changes = {**changes, "tags": []}
            updated = existing.model_copy(update=changes)
            self._blogs[blog_id] = updated
            return updated

    def delete_blog(self, blog_id: int) -> bool:
        with self._lock:
            return self._blogs.pop(blog_id, None) is not None

    def count_blogs(self) -> int:
        return len(self._blogs)

    def _find_blog_by_slug(self, slug: str) -> Blog | None:
        return next((b for b in self._blogs.values() if b.slug == slug), None)
