"""
Hashing helpers and the opt-in passphrase → key derivation.
"""

from cryptography.hazmat.primitives import hashes


class HashCrypto:
    """Static helpers for hashing."""

    @staticmethod
    def sha256(data: bytes) -> bytes:
        d = hashes.Hash(hashes.SHA256())
        d.update(data)
        return d.finalize()

    @staticmethod
    def derive_key(passphrase: str | bytes, length: int = 32) -> bytes:
        """
        Derive a fixed-length key from an arbitrary-length passphrase.

        SHA-256 of the UTF-8 bytes, truncated to *length*. This is a
        plain digest, not a password KDF: only feed it high-entropy input.
        The result can be passed straight to ``Dgcrypt.set_key``.
        """
        if isinstance(passphrase, str):
            passphrase = passphrase.encode("utf-8")
        if not 0 < length <= 32:
            raise ValueError(f"length must be 1..32, got {length}")
        return HashCrypto.sha256(passphrase)[:length]
