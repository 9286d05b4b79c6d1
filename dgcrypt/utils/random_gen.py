"""
Cryptographically-secure random value generators.
"""

import os
import secrets

from ..errors import NonceReuseError


class SecureRandom:

    @staticmethod
    def generate_nonce(length: int = 12) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_iv(length: int = 16) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_key(length: int = 32) -> bytes:
        return secrets.token_bytes(length)


class Nonce:
    """
    A nonce that can be handed to a cipher exactly once.

    ``consume()`` returns the raw bytes on the first call and raises
    NonceReuseError on every later call, so one Nonce object can never
    encrypt two messages.
    """

    __slots__ = ("_value", "_consumed")

    def __init__(self, value: bytes):
        self._value    = bytes(value)
        self._consumed = False

    @classmethod
    def random(cls, length: int = 12) -> "Nonce":
        return cls(SecureRandom.generate_nonce(length))

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "fresh"
        return f"<Nonce {len(self._value)}B {state}>"

    @property
    def consumed(self) -> bool:
        return self._consumed

    def consume(self) -> bytes:
        if self._consumed:
            raise NonceReuseError("Nonce has already been used")
        self._consumed = True
        return self._value
