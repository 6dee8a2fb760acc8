from utils.config import load_config
from utils.errors import VerificationError
from utils.events import parse_user_details
from utils.links import generate_link
from utils.logger import get_logger
from utils.secrets import load_secrets
from utils.sendgrid_client import build_client, build_message, send_verification_email
from utils.tracking import track_email

logger = get_logger("handler")

SUCCESS = {"statusCode": 200, "body": "Email sent successfully"}
FAILURE = {"statusCode": 500, "body": "Failed to send email"}


def _process(event) -> None:
    # 1) Configuration + secrets, fresh on every invocation
    config = load_config()
    secrets = load_secrets(config)

    # 2) User details from the SNS envelope
    user = parse_user_details(event)
    logger.info(
        "handler.user_parsed",
        extra={"email": user.email, "user_id": user.id},
    )

    # 3) Verification link
    link = generate_link(user, config)

    # 4) Send via SendGrid
    client = build_client(secrets)
    message = build_message(
        user.email,
        user.first_name,
        link,
        secrets.verified_sender,
        expires=config.link_mode == "expiring",
    )
    send_verification_email(client, message, to_email=user.email)

    # 5) Audit row, only after a successful send
    track_email(config, secrets.db_password, user, link)


def lambda_handler(event, context):
    try:
        records = event.get("Records") if isinstance(event, dict) else None
        logger.info(
            "handler.lambda_start",
            extra={
                "request_id": getattr(context, "aws_request_id", None),
                "records": len(records) if isinstance(records, list) else 0,
            },
        )

        _process(event)
    except VerificationError as e:
        logger.error(
            "handler.failed",
            extra={
                "error_type": type(e).__name__,
                "error": str(e),
                "cause": repr(e.cause) if e.cause is not None else None,
            },
        )
        return dict(FAILURE)
    except Exception:
        logger.exception("handler.unexpected_error")
        return dict(FAILURE)

    logger.info("handler.lambda_done")
    return dict(SUCCESS)
