"""
Abstract base class for the symmetric ciphers behind Dgcrypt.

Every cipher (AES-256-CBC, AES-256-GCM, ChaCha20-Poly1305) implements
this interface so the codec can treat them uniformly.
"""

from abc import ABC, abstractmethod


class SymmetricCipher(ABC):
    """
    Unified interface for symmetric encryption over raw bytes.

    encrypt() returns the envelope bytes:
        AEAD ciphers  → iv + tag + ciphertext
        CBC  ciphers  → iv + ciphertext

    decrypt() accepts that envelope and returns plaintext. Errors from
    the underlying library (InvalidTag, ValueError) propagate unchanged.
    """

    @abstractmethod
    def encrypt(self, plaintext: bytes, iv: bytes) -> bytes:
        """Encrypt plaintext under *iv* → envelope bytes."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt envelope produced by encrypt() → plaintext."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Method identifier, e.g. 'aes-256-gcm'."""

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Encryption key size in bytes."""

    @property
    @abstractmethod
    def iv_size(self) -> int:
        """IV / nonce size in bytes."""

    @property
    @abstractmethod
    def is_aead(self) -> bool:
        """True if cipher has built-in authentication (GCM, Poly1305)."""

    @property
    def tag_size(self) -> int:
        return 16 if self.is_aead else 0

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8

    @property
    def overhead(self) -> int:
        """Envelope bytes added on top of the ciphertext."""
        return self.iv_size + self.tag_size

    def _check_iv(self, iv: bytes):
        if len(iv) != self.iv_size:
            raise ValueError(
                f"{self.cipher_name} IV must be {self.iv_size} bytes, "
                f"got {len(iv)}"
            )

    def _check_envelope(self, data: bytes):
        if len(data) < self.overhead:
            raise ValueError(
                f"{self.cipher_name} envelope too short: {len(data)} bytes"
            )

    def info(self) -> dict:
        """Return cipher metadata."""
        return {
            "name":        self.cipher_name,
            "key_bits":    self.key_size_bits,
            "iv_bytes":    self.iv_size,
            "tag_bytes":   self.tag_size,
            "aead":        self.is_aead,
            "auth_method": "Built-in" if self.is_aead else "None",
        }
