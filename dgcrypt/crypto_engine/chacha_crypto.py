"""
ChaCha20-Poly1305 — modern AEAD stream cipher.

Excellent performance on devices without hardware AES acceleration.

Key:   32 bytes (256 bits)
Nonce: 12 bytes (96 bits)
Tag:   16 bytes (128 bits) — appended to the ciphertext by the library
"""

from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from .symmetric_base import SymmetricCipher


class ChaCha20Cipher(SymmetricCipher):
    """
    ChaCha20-Poly1305 AEAD cipher.

    Output format:  [nonce 12B][Poly1305 tag 16B][ciphertext]
    """
    NONCE_SIZE = 12
    TAG_SIZE   = 16
    KEY_SIZE   = 32

    def __init__(self, key: bytes):
        if len(key) != self.KEY_SIZE:
            raise ValueError(
                f"ChaCha20 key must be 32 bytes, got {len(key)}"
            )
        self._key    = bytes(key)
        self._chacha = ChaCha20Poly1305(self._key)

    def encrypt(self, plaintext: bytes, iv: bytes) -> bytes:
        self._check_iv(iv)
        # library returns ct ‖ tag; move the tag in front
        ct_tag = memoryview(self._chacha.encrypt(iv, plaintext, None))
        return b"".join((iv, ct_tag[-self.TAG_SIZE:], ct_tag[:-self.TAG_SIZE]))

    def decrypt(self, data: bytes) -> bytes:
        self._check_envelope(data)
        view  = memoryview(data)
        nonce = bytes(view[:self.NONCE_SIZE])
        tag   = view[self.NONCE_SIZE:self.overhead]
        ct    = b"".join((view[self.overhead:], tag))
        return self._chacha.decrypt(nonce, ct, None)

    @property
    def cipher_name(self) -> str:
        return "chacha20-poly1305"

    @property
    def key_size(self) -> int:
        return self.KEY_SIZE

    @property
    def iv_size(self) -> int:
        return self.NONCE_SIZE

    @property
    def is_aead(self) -> bool:
        return True

    def info(self) -> dict:
        base = super().info()
        base["security_note"] = (
            "ChaCha20-Poly1305 is recommended for devices without "
            "AES-NI hardware support. Same security as AES-256-GCM."
        )
        return base
