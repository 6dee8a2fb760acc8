from datetime import datetime, timezone

import psycopg2

from utils.errors import DbError
from utils.logger import get_logger

logger = get_logger("tracking")

TRACKING_TABLE = "email_tracking"

INSERT_QUERY = (
    f"INSERT INTO {TRACKING_TABLE} "
    "(email, verification_link, user_id, token, created_at) "
    "VALUES (%s, %s, %s, %s, %s)"
)


def get_connection(config, password: str):
    logger.debug(
        "tracking.connect",
        extra={"host": config.db_host, "port": config.db_port, "database": config.db_name},
    )
    try:
        return psycopg2.connect(
            host=config.db_host,
            port=config.db_port,
            user=config.db_user,
            password=password,
            dbname=config.db_name,
        )
    except psycopg2.Error as e:
        raise DbError(f"Database connection failed: {e}") from e


def track_email(config, password: str, user, link: str, created_at: datetime = None) -> None:
    """
    Record one sent verification email.

    Opens a connection for this call only and closes it on every exit path.
    """
    if created_at is None:
        created_at = datetime.now(timezone.utc)

    conn = get_connection(config, password)
    try:
        with conn.cursor() as cursor:
            cursor.execute(
                INSERT_QUERY,
                (user.email, link, user.id, user.token, created_at),
            )
        conn.commit()
    except psycopg2.Error as e:
        logger.error(
            "tracking.insert_error",
            extra={"error": str(e), "email": user.email, "user_id": user.id},
        )
        raise DbError(f"Failed to insert tracking row: {e}") from e
    finally:
        conn.close()

    logger.info(
        "tracking.inserted",
        extra={"email": user.email, "user_id": user.id},
    )
