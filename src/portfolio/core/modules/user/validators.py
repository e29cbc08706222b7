from portfolio.errors import ValidationError


def validate_username(username: str) -> None:
    """Validate username is non-blank and has no surrounding whitespace."""
    if not username.strip():
        raise ValidationError("Username is required", [{"field": "username", "message": "Username is required"}])

    if username != username.strip():
        message = "Username cannot start or end with whitespace"
        raise ValidationError(message, [{"field": "username", "message": message}])


def validate_password(password: str) -> None:
    """Validate password meets requirements.

    Requirements:
    - No whitespace characters
    - Minimum length of 2 characters

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if len(password) < 2:
        message = "Password must be at least 2 characters long"
        raise ValidationError(message, [{"field": "password", "message": message}])

    if any(char.isspace() for char in password):
        message = "Password cannot contain whitespace characters"
        raise ValidationError(message, [{"field": "password", "message": message}])
