"""
Email Verification Sender Utilities
===================================

Shared helpers for the verification Lambda:

- logger.py           → structured JSON logging
- config.py           → environment configuration
- errors.py           → pipeline error types
- secrets.py          → AWS Secrets Manager integration
- events.py           → SNS envelope parsing
- links.py            → verification link builders
- sendgrid_client.py  → SendGrid client and message builder
- tracking.py         → email_tracking inserts (PostgreSQL)

Nothing here keeps state between invocations.
"""
