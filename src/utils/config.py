import os
from dataclasses import dataclass

from utils.errors import ConfigError
from utils.logger import get_logger

logger = get_logger("config")

LINK_MODES = ("token", "expiring")


@dataclass(frozen=True)
class Config:
    sendgrid_secret_id: str
    db_secret_id: str
    db_host: str
    db_user: str
    db_name: str
    db_port: int = 5432
    environment: str = "prod"
    link_mode: str = "token"
    region: str = "us-east-1"


def load_config() -> Config:
    """
    Load the handler configuration from environment variables.

    SENDGRID_SECRET_ID: Secrets Manager id holding {api_key, verified_sender}
    DB_SECRET_ID:       Secrets Manager id holding {password}
    DB_HOST / DB_USER / DB_DATABASE: tracking database coordinates
    DB_PORT:            optional, defaults to 5432
    ENVIRONMENT:        subdomain of the verification host (default: prod)
    VERIFY_LINK_MODE:   "token" (default) or "expiring"
    AWS_REGION:         Secrets Manager region (default: us-east-1)

    Raises ConfigError listing every missing variable at once.
    """
    required = {
        "SENDGRID_SECRET_ID": os.getenv("SENDGRID_SECRET_ID"),
        "DB_SECRET_ID": os.getenv("DB_SECRET_ID"),
        "DB_HOST": os.getenv("DB_HOST"),
        "DB_USER": os.getenv("DB_USER"),
        "DB_DATABASE": os.getenv("DB_DATABASE"),
    }

    missing = [name for name, value in required.items() if not value]
    if missing:
        msg = f"Missing required environment variables: {', '.join(missing)}"
        logger.error(msg)
        raise ConfigError(msg)

    db_port_str = os.getenv("DB_PORT", "5432")
    try:
        db_port = int(db_port_str)
    except ValueError as e:
        msg = f"Invalid DB_PORT='{db_port_str}'. Must be an integer port number."
        logger.error(msg)
        raise ConfigError(msg) from e

    link_mode = os.getenv("VERIFY_LINK_MODE", "token").lower()
    if link_mode not in LINK_MODES:
        msg = (
            f"Invalid VERIFY_LINK_MODE='{link_mode}'. "
            f"Expected one of: {', '.join(LINK_MODES)}"
        )
        logger.error(msg)
        raise ConfigError(msg)

    return Config(
        sendgrid_secret_id=required["SENDGRID_SECRET_ID"],
        db_secret_id=required["DB_SECRET_ID"],
        db_host=required["DB_HOST"],
        db_user=required["DB_USER"],
        db_name=required["DB_DATABASE"],
        db_port=db_port,
        environment=os.getenv("ENVIRONMENT", "prod"),
        link_mode=link_mode,
        region=os.getenv("AWS_REGION", "us-east-1"),
    )
