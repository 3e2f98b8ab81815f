"""Failures raised while talking to WAYF and validating its tokens."""


class WayfError(Exception):
    """Base class for connector errors."""


class KeyFormatError(WayfError):
    """The provider public key could not be parsed or is not RSA."""


class TransportError(WayfError):
    """The HTTP round trip to the provider failed."""


class MissingAuthorizationError(WayfError):
    """The provider response carried no Authorization header."""


class InvalidAuthorizationError(WayfError):
    """The Authorization header did not contain a bearer token."""


class SignatureValidationError(WayfError):
    """The bearer token failed signature verification."""
