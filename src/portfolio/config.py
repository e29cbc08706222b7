from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    cors_origins: list[str] = []
    session_ttl_hours: int = 24  # Fixed session lifetime, no renewal
    cookie_secure: bool = False  # Set to True behind HTTPS
    admin_username: str = "admin"  # Seeded on startup if missing
    admin_password: str = "admin123"
    password_hash_rounds: int = 12  # bcrypt cost factor
    seed_sample_blogs: bool = True  # Load the sample posts on startup

    model_config = {
        "env_file": [".env"],
        "env_prefix": "PORTFOLIO_",
        "extra": "ignore",
    }
