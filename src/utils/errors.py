"""
Error types raised by the verification pipeline.

Every step raises a subclass of VerificationError, chained to the underlying
exception, so the handler can log what failed while still answering with a
single generic status.
"""


class VerificationError(Exception):
    """Base class for pipeline failures."""

    @property
    def cause(self):
        return self.__cause__


class ConfigError(VerificationError):
    pass


class ParseError(VerificationError):
    """The notification envelope or its message could not be decoded."""


class MalformedEvent(ParseError):
    """The event decoded but is missing required structure or fields."""


class SecretError(VerificationError):
    pass


class SecretUnavailable(SecretError):
    """Secrets Manager returned no SecretString (e.g. a binary-only secret)."""


class SendError(VerificationError):
    pass


class DbError(VerificationError):
    pass
