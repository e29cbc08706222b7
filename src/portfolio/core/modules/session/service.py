import secrets
from datetime import timedelta

import structlog

from portfolio import utils
from portfolio.core.core import Service
from portfolio.core.modules.session.models import AuthToken, Session
from portfolio.core.modules.user.models import User
from portfolio.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues and validates admin session tokens.

    Expiry is checked lazily: an expired session is removed the first time it
    is looked up after its deadline. There is no background sweep.
    """

    def create_session(self, user_id: int) -> Session:
        created_at = utils.now()
        session = Session(
            id=AuthToken(secrets.token_urlsafe(32)),
            user_id=user_id,
            created_at=created_at,
            expires_at=created_at + timedelta(hours=self.core.config.session_ttl_hours),
        )
        self.store.add_session(session)
        logger.debug("session_created", user_id=user_id, expires_at=session.expires_at.isoformat())
        return session

    def validate_session(self, auth_token: AuthToken) -> User:
        """Resolve a token to its user.

        Missing, expired and dangling sessions all raise the same error.
        """
        session = self.store.get_session(auth_token)
        if session is None:
            raise AuthenticationError("Invalid or expired session")

        if session.is_expired(utils.now()):
            self.store.delete_session(auth_token)
            logger.debug("session_expired", user_id=session.user_id)
            raise AuthenticationError("Invalid or expired session")

        user = self.store.get_user(session.user_id)
        if user is None:
            logger.warning("session_user_missing", user_id=session.user_id)
            raise AuthenticationError("Invalid or expired session")

        return user

    def invalidate_session(self, auth_token: AuthToken) -> None:
        """Invalidate a session. Unknown tokens are ignored."""
        self.store.delete_session(auth_token)
