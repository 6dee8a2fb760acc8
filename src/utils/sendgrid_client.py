# utils/sendgrid_client.py

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from utils.errors import SendError
from utils.logger import get_logger

logger = get_logger("sendgrid_client")

SUBJECT = "Welcome! Please verify your email"
SIGNATURE = "Srijith Makam"
EXPIRY_NOTE = "This link will expire in 2 minutes."


def build_client(secrets) -> SendGridAPIClient:
    """Build a SendGrid client from the resolved secrets bundle."""
    client = SendGridAPIClient(secrets.api_key)
    logger.info("SendGrid client initialized")
    return client


def _text_body(first_name: str, link: str, expires: bool) -> str:
    lines = [
        f"Hello {first_name},",
        "",
        f"Please click on the following link to verify your email address: {link}",
    ]
    if expires:
        lines.append(EXPIRY_NOTE)
    lines += [
        "",
        "If you did not request this, please ignore this email.",
        "",
        "Best regards,",
        SIGNATURE,
    ]
    return "\n".join(lines)


def _html_body(first_name: str, link: str, expires: bool) -> str:
    parts = [
        f"<p>Hello {first_name},</p>",
        "<p>Please click on the following link to verify your email address: "
        f'<a href="{link}">{link}</a></p>',
    ]
    if expires:
        parts.append(f"<p>{EXPIRY_NOTE}</p>")
    parts += [
        "<p>If you did not request this, please ignore this email.</p>",
        f"<p>Best regards,<br>{SIGNATURE}</p>",
    ]
    return "\n".join(parts)


def build_message(to_email: str, first_name: str, link: str, sender: str, expires: bool = False) -> Mail:
    return Mail(
        from_email=sender,
        to_emails=to_email,
        subject=SUBJECT,
        plain_text_content=_text_body(first_name, link, expires),
        html_content=_html_body(first_name, link, expires),
    )


def send_verification_email(client, message: Mail, to_email: str = None):
    """
    Send one message through SendGrid.

    Any transport or API error (bad key, unverified sender, rate limit) is
    raised as SendError with the original exception chained.
    """
    try:
        resp = client.send(message)
    except Exception as e:
        logger.error(
            "sendgrid.send_error",
            extra={"error": str(e), "to": to_email},
        )
        raise SendError(f"SendGrid send failed: {e}") from e

    status = getattr(resp, "status_code", None)
    if status is None or not 200 <= int(status) < 300:
        logger.error(
            "sendgrid.unexpected_status",
            extra={"status_code": status, "to": to_email},
        )
        raise SendError(f"SendGrid returned status {status}")

    logger.info(
        "sendgrid.sent",
        extra={
            "status_code": status,
            "to": to_email,
            "message_id": (getattr(resp, "headers", None) or {}).get("X-Message-Id"),
        },
    )
    return resp
