"""
CipherFactory — cipher creation and discovery by method identifier.

Usage:
    cipher = CipherFactory.create("aes-256-gcm", key)
    envelope = cipher.encrypt(b"hello", iv)
    plaintext = cipher.decrypt(envelope)

    for name in CipherFactory.list_ciphers():
        print(CipherFactory.get_info(name))
"""

import logging

from ..errors import UnsupportedMethodError, InvalidKeyLengthError
from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESGCMCipher, AESCBCCipher
from .chacha_crypto  import ChaCha20Cipher

logger = logging.getLogger("Dgcrypt.CipherFactory")


class CipherFactory:
    """Create any supported cipher by its exact method identifier."""

    # ── Registry ─────────────────────────────────────────────────
    _REGISTRY: dict[str, dict] = {
        "aes-256-cbc": {
            "class":    AESCBCCipher,
            "key_size": 32,
            "iv_size":  16,
            "tag_size": 0,
            "aead":     False,
            "category": "CBC",
            "security": "Confidentiality only (no integrity)",
            "speed":    "Fast",
        },
        "aes-256-gcm": {
            "class":    AESGCMCipher,
            "key_size": 32,
            "iv_size":  12,
            "tag_size": 16,
            "aead":     True,
            "category": "AEAD",
            "security": "Very High (256-bit)",
            "speed":    "Fast (AES-NI)",
        },
        "chacha20-poly1305": {
            "class":    ChaCha20Cipher,
            "key_size": 32,
            "iv_size":  12,
            "tag_size": 16,
            "aead":     True,
            "category": "AEAD",
            "security": "Very High (256-bit)",
            "speed":    "Fast (no AES-NI needed)",
        },
    }

    # ── Factory method ───────────────────────────────────────────

    @classmethod
    def create(cls, method: str, key: bytes) -> SymmetricCipher:
        """
        Create a cipher instance.

        Parameters
        ----------
        method : str
            One of the registered identifiers (e.g. "aes-256-gcm").
        key : bytes
            Exactly the cipher's key size (32 bytes for every method).

        Returns
        -------
        SymmetricCipher
            Ready-to-use cipher instance.
        """
        info = cls._lookup(method)
        if len(key) != info["key_size"]:
            raise InvalidKeyLengthError(
                f"{method} needs a {info['key_size']}-byte key, "
                f"got {len(key)}"
            )

        cipher = info["class"](key)
        logger.debug(
            "Created cipher: %s (key=%d bits, aead=%s)",
            cipher.cipher_name, cipher.key_size_bits, info["aead"],
        )
        return cipher

    @classmethod
    def _lookup(cls, method: str) -> dict:
        if method not in cls._REGISTRY:
            raise UnsupportedMethodError(
                "Unsupported method. Supported methods: "
                + ", ".join(cls.list_ciphers())
            )
        return cls._REGISTRY[method]

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_ciphers(cls) -> list[str]:
        """Return all registered method identifiers."""
        return list(cls._REGISTRY)

    @classmethod
    def list_aead_ciphers(cls) -> list[str]:
        """Return only AEAD method identifiers."""
        return [
            name for name, info in cls._REGISTRY.items()
            if info["aead"]
        ]

    @classmethod
    def get_info(cls, method: str) -> dict:
        """Return metadata for a method."""
        info = cls._lookup(method)
        return {
            "name":      method,
            "key_bits":  info["key_size"] * 8,
            "iv_bytes":  info["iv_size"],
            "tag_bytes": info["tag_size"],
            "aead":      info["aead"],
            "category":  info["category"],
            "security":  info["security"],
            "speed":     info["speed"],
        }

    @classmethod
    def is_available(cls, method: str) -> bool:
        return method in cls._REGISTRY

    @classmethod
    def is_aead(cls, method: str) -> bool:
        return cls._lookup(method)["aead"]

    @classmethod
    def get_iv_size(cls, method: str) -> int:
        return cls._lookup(method)["iv_size"]

    @classmethod
    def get_tag_size(cls, method: str) -> int:
        return cls._lookup(method)["tag_size"]

    @classmethod
    def get_required_key_size(cls, method: str) -> int:
        """Return required key size in bytes."""
        return cls._lookup(method)["key_size"]

    @classmethod
    def recommend(cls, has_aes_ni: bool = True) -> str:
        """Recommend an AEAD method for the current hardware."""
        if not has_aes_ni:
            return "chacha20-poly1305"
        return "aes-256-gcm"
