"""
Exception types raised by Dgcrypt.

Parameter-validation errors also derive from ValueError so callers that
already catch ValueError around cipher setup keep working.
"""


class DgcryptError(Exception):
    """Base exception for all Dgcrypt operations."""
    pass


class UnsupportedMethodError(DgcryptError, ValueError):
    """Raised when a cipher method identifier is not supported."""
    pass


class InvalidKeyLengthError(DgcryptError, ValueError):
    """Raised when a secret key is not exactly 32 bytes."""
    pass


class InvalidIVLengthError(DgcryptError, ValueError):
    """Raised when an IV does not match the length the method expects."""

    def __init__(self, expected: int, method: str, actual: int | None = None):
        self.expected = expected
        self.method   = method
        self.actual   = actual
        # keep the constructor arguments in args so pickle/copy can rebuild it
        super().__init__(expected, method, actual)

    def __str__(self) -> str:
        return f"IV should be {self.expected} bytes for {self.method}"


class MissingKeyError(DgcryptError):
    """Raised when encrypt/decrypt runs before any key was installed."""
    pass


class NonceReuseError(DgcryptError):
    """Raised when a one-time nonce is used a second time."""
    pass


class DecryptionFailedError(DgcryptError):
    """
    Raised for every decrypt-path failure.

    Tag mismatch, bad padding, malformed base64 and truncated envelopes all
    surface with the same message.
    """

    MESSAGE = ("Decryption failed: data may have been tampered with "
               "or corrupted")

    def __init__(self, message: str | None = None):
        super().__init__(message or self.MESSAGE)
