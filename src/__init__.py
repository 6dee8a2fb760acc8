"""
Email Verification Sender
=========================

AWS Lambda function that sends a verification email to a newly registered
user. It is subscribed to the user-registration SNS topic; each invocation
resolves its credentials from Secrets Manager, builds a verification link,
sends the email through SendGrid and records the send in the
`email_tracking` table.

Modules under this package:
- handler.py  → SNS-triggered entrypoint (lambda_handler)
- utils/      → configuration, secrets, event parsing, links, SendGrid, tracking

Environment variables expected:
  • SENDGRID_SECRET_ID   - Secrets Manager id of {api_key, verified_sender}
  • DB_SECRET_ID         - Secrets Manager id of {password}
  • DB_HOST, DB_USER, DB_DATABASE, DB_PORT - tracking database
  • ENVIRONMENT          - verification host prefix (default: prod)
  • VERIFY_LINK_MODE     - "token" (default) or "expiring"
  • AWS_REGION           - region for Secrets Manager
  • LOG_LEVEL            - log verbosity (default: INFO)

The handler is stateless; nothing is cached between invocations.
"""

__version__ = "2.0.0"
__author__ = "Srijith Makam"
__license__ = "MIT"

__all__ = ["__version__", "__author__"]
