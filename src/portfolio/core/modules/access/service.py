from portfolio.core.core import Service
from portfolio.core.modules.session.models import AuthToken
from portfolio.core.modules.user.models import User
from portfolio.errors import AuthenticationError


class AccessService(Service):
    def ensure_authenticated(self, auth_token: AuthToken | None) -> User:
        """Ensure the caller holds a valid session. Re-validated on every call."""
        if not auth_token:
            raise AuthenticationError("Authentication required")
        return self.core.services.session.validate_session(auth_token)
