import json

import pytest


ENV = {
    "SENDGRID_SECRET_ID": "verify-email/sendgrid",
    "DB_SECRET_ID": "verify-email/db",
    "DB_HOST": "db.internal",
    "DB_USER": "webapp",
    "DB_DATABASE": "csye6225",
    "ENVIRONMENT": "prod",
    "AWS_REGION": "us-east-1",
}


@pytest.fixture
def lambda_env(monkeypatch):
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)
    for key in ("DB_PORT", "VERIFY_LINK_MODE"):
        monkeypatch.delenv(key, raising=False)
    # moto and boto3 both want credentials present
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    return ENV


def sns_event(message) -> dict:
    if not isinstance(message, str):
        message = json.dumps(message)
    return {
        "Records": [
            {
                "EventSource": "aws:sns",
                "Sns": {
                    "Type": "Notification",
                    "TopicArn": "arn:aws:sns:us-east-1:123456789012:user-created",
                    "Message": message,
                },
            }
        ]
    }


@pytest.fixture
def user_message():
    return {
        "email": "a@b.com",
        "first_name": "Ada",
        "id": "8c2d5e1a-0f3b-4c6e-9d7a-1b2c3d4e5f60",
        "token": "tok123",
    }
