from functools import cached_property

import bcrypt
import structlog

from portfolio.core.core import Service
from portfolio.core.modules.user.models import User
from portfolio.core.modules.user.validators import validate_password, validate_username
from portfolio.errors import NotFoundError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Manages user accounts and password checks."""

    def get_user_by_username(self, username: str) -> User:
        """Get user by username."""
        user = self.store.get_user_by_username(username)
        if user is None:
            raise NotFoundError(f"User '{username}' not found")
        return user

    def has_username(self, username: str) -> bool:
        """Check if username exists."""
        return self.store.get_user_by_username(username) is not None

    def create_user(self, username: str, password: str) -> User:
        """Create user with hashed password."""
        validate_username(username)
        validate_password(password)
        salt = bcrypt.gensalt(rounds=self.core.config.password_hash_rounds)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
        user = self.store.create_user(username, password_hash)
        logger.info("user_created", user_id=user.id, username=username)
        return user

    @cached_property
    def _dummy_hash(self) -> bytes:
        """Hash checked for unknown usernames so every login costs one bcrypt round trip."""
        return bcrypt.hashpw(b"unused-password", bcrypt.gensalt(rounds=self.core.config.password_hash_rounds))

    def verify_password(self, username: str, password: str) -> User | None:
        """Return the user if the password matches its stored hash."""
        user = self.store.get_user_by_username(username)
        if user is None:
            bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
            return None
        if not bcrypt.checkpw(password.encode("utf-8"), user.password_hash.encode("utf-8")):
            return None
        return user

    def ensure_admin_user_exists(self) -> None:
        """Create default admin user if not exists."""
        config = self.core.config
        if not self.has_username(config.admin_username):
            self.create_user(config.admin_username, config.admin_password)

    async def on_start(self) -> None:
        """Seed the admin user."""
        self.ensure_admin_user_exists()
        _ = self._dummy_hash
        logger.debug("user_service_started", user_count=self.store.count_users())
