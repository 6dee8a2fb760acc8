import json
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from utils.errors import SecretError, SecretUnavailable
from utils.logger import get_logger

logger = get_logger("secrets")


@dataclass(frozen=True)
class Secrets:
    api_key: str
    verified_sender: str
    db_password: str

    def __repr__(self) -> str:
        return f"Secrets(verified_sender={self.verified_sender!r}, api_key=***, db_password=***)"


def get_secret_value(secret_id: str, region: str = None, client=None) -> dict:
    """
    Fetch one secret from AWS Secrets Manager and decode it as a JSON object.

    Raises SecretUnavailable when the secret has no SecretString payload and
    SecretError when the call fails or the payload is not a JSON object.
    """
    logger.info(
        "secrets.fetch",
        extra={"secret_id": secret_id, "region": region},
    )

    if client is None:
        client = boto3.client("secretsmanager", region_name=region)

    try:
        resp = client.get_secret_value(SecretId=secret_id)
    except (BotoCoreError, ClientError) as e:
        logger.error(
            "secrets.fetch_error",
            extra={"secret_id": secret_id, "error": str(e)},
        )
        raise SecretError(f"Failed to retrieve secret '{secret_id}': {e}") from e

    secret_str = resp.get("SecretString")
    if not secret_str:
        msg = f"Secret '{secret_id}' has no SecretString payload"
        logger.error(msg)
        raise SecretUnavailable(msg)

    try:
        data = json.loads(secret_str)
    except json.JSONDecodeError as e:
        logger.error(
            "secrets.invalid_json",
            extra={"secret_id": secret_id, "error": str(e)},
        )
        raise SecretError(f"Secret '{secret_id}' is not valid JSON") from e

    if not isinstance(data, dict):
        raise SecretError(f"Secret '{secret_id}' must be a JSON object")

    return data


def _pick(data: dict, *names: str):
    for name in names:
        if data.get(name):
            return data[name]
    return None


def load_secrets(config) -> Secrets:
    """
    Resolve the SendGrid credentials and the database password.

    Both lookups happen on every invocation. The SendGrid secret is expected
    to look like {"api_key": "...", "verified_sender": "..."} and the database
    secret like {"password": "..."}; the older SENDGRID_API_KEY,
    SENDGRID_VERIFIED_SENDER and DB_PASS keys are accepted too.
    """
    client = boto3.client("secretsmanager", region_name=config.region)

    sendgrid = get_secret_value(config.sendgrid_secret_id, config.region, client=client)
    db = get_secret_value(config.db_secret_id, config.region, client=client)

    api_key = _pick(sendgrid, "api_key", "SENDGRID_API_KEY")
    verified_sender = _pick(sendgrid, "verified_sender", "SENDGRID_VERIFIED_SENDER")
    db_password = _pick(db, "password", "DB_PASS")

    missing = [
        name
        for name, value in [
            ("api_key", api_key),
            ("verified_sender", verified_sender),
            ("password", db_password),
        ]
        if not value
    ]
    if missing:
        logger.error("secrets.missing_fields", extra={"missing": missing})
        raise SecretError(f"Missing secret fields: {', '.join(missing)}")

    return Secrets(api_key=api_key, verified_sender=verified_sender, db_password=db_password)
