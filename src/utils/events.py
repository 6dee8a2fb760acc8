import json
from dataclasses import dataclass
from typing import Optional

from utils.errors import MalformedEvent, ParseError
from utils.logger import get_logger

logger = get_logger("events")

REQUIRED_FIELDS = ("email", "first_name", "id")


@dataclass(frozen=True)
class UserDetails:
    email: str
    first_name: str
    id: str
    token: Optional[str] = None


def _sns_message(event) -> str:
    try:
        records = event["Records"]
    except (KeyError, TypeError) as e:
        raise MalformedEvent("Event has no Records") from e

    if not records:
        raise MalformedEvent("Event Records list is empty")

    try:
        return records[0]["Sns"]["Message"]
    except (KeyError, TypeError) as e:
        raise MalformedEvent("First record has no Sns.Message") from e


def parse_user_details(event: dict) -> UserDetails:
    """
    Extract the registered user from an SNS envelope.

    The first record's Sns.Message is a JSON string like
    {"email": "...", "first_name": "...", "id": "...", "token": "..."}.
    Only presence is checked; token may be absent.
    """
    raw = _sns_message(event)

    try:
        msg = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(
            "events.invalid_json",
            extra={"preview": str(raw)[:200]},
        )
        raise ParseError("SNS message is not valid JSON") from e

    if not isinstance(msg, dict):
        raise MalformedEvent("SNS message must be a JSON object")

    missing = [name for name in REQUIRED_FIELDS if msg.get(name) in (None, "")]
    if missing:
        logger.warning("events.missing_fields", extra={"missing": missing})
        raise MalformedEvent(f"Missing user fields: {', '.join(missing)}")

    token = msg.get("token")
    return UserDetails(
        email=msg["email"],
        first_name=msg["first_name"],
        id=str(msg["id"]),
        token=str(token) if token not in (None, "") else None,
    )
