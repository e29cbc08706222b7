from pydantic import BaseModel, Field


class User(BaseModel):
    """User domain model with credentials."""

    id: int
    username: str
    password_hash: str  # bcrypt hash


class UserView(BaseModel):
    """User account information (API representation)."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        """Create view model from domain model."""
        return cls(id=user.id, username=user.username)
