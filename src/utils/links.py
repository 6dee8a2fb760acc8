from datetime import datetime, timedelta, timezone

from utils.errors import MalformedEvent

VERIFY_HOST = "srijithmakam.me"
LINK_TTL = timedelta(minutes=2)


def _iso_millis(ts: datetime) -> str:
    # 2026-10-18T12:02:00.000Z
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_verification_link(email: str, token: str, environment: str) -> str:
    return f"https://{environment}.{VERIFY_HOST}/v1/user/verify?email={email}&token={token}"


def build_expiring_link(email: str, now: datetime = None) -> str:
    """Link carrying an expiry two minutes from `now`. Nothing here enforces it."""
    if now is None:
        now = datetime.now(timezone.utc)
    expires = _iso_millis(now + LINK_TTL)
    return f"https://{VERIFY_HOST}/verify?email={email}&expires={expires}"


def generate_link(user, config, now: datetime = None) -> str:
    if config.link_mode == "expiring":
        return build_expiring_link(user.email, now)

    if not user.token:
        raise MalformedEvent("Missing user fields: token")
    return build_verification_link(user.email, user.token, config.environment)
