"""
AES-256 symmetric encryption — GCM (authenticated) and CBC modes.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding

from .symmetric_base import SymmetricCipher


def _check_key(key: bytes, expected: int = 32):
    if len(key) != expected:
        raise ValueError(
            f"AES-256 key must be {expected} bytes, got {len(key)}"
        )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  AES-256-GCM (AEAD)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESGCMCipher(SymmetricCipher):
    """
    AES in Galois/Counter Mode (authenticated encryption).

    Output format:  [IV 12B][GCM tag 16B][ciphertext]

    The streaming GCM context is used instead of AESGCM so the tag comes
    back separately and the envelope is assembled with a single join.
    """
    IV_SIZE  = 12
    TAG_SIZE = 16
    KEY_SIZE = 32

    def __init__(self, key: bytes):
        _check_key(key, self.KEY_SIZE)
        self._key = bytes(key)

    def encrypt(self, plaintext: bytes, iv: bytes) -> bytes:
        self._check_iv(iv)
        enc = Cipher(algorithms.AES(self._key), modes.GCM(iv)).encryptor()
        ct  = enc.update(plaintext) + enc.finalize()
        return b"".join((iv, enc.tag, ct))         # iv ‖ tag ‖ ct

    def decrypt(self, data: bytes) -> bytes:
        self._check_envelope(data)
        view = memoryview(data)
        iv   = bytes(view[:self.IV_SIZE])
        tag  = bytes(view[self.IV_SIZE:self.overhead])
        dec  = Cipher(
            algorithms.AES(self._key), modes.GCM(iv, tag)
        ).decryptor()
        # finalize() raises InvalidTag on mismatch
        return dec.update(view[self.overhead:]) + dec.finalize()

    @property
    def cipher_name(self) -> str:
        return "aes-256-gcm"

    @property
    def key_size(self) -> int:
        return self.KEY_SIZE

    @property
    def iv_size(self) -> int:
        return self.IV_SIZE

    @property
    def is_aead(self) -> bool:
        return True


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  AES-256-CBC + PKCS7
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESCBCCipher(SymmetricCipher):
    """
    AES in CBC mode with PKCS7 padding.

    Output format:  [IV 16B][ciphertext padded]

    There is no MAC: a modified envelope either fails unpadding or
    decrypts to garbage.
    """
    IV_SIZE    = 16
    KEY_SIZE   = 32
    BLOCK_BITS = 128

    def __init__(self, key: bytes):
        _check_key(key, self.KEY_SIZE)
        self._key = bytes(key)

    def encrypt(self, plaintext: bytes, iv: bytes) -> bytes:
        self._check_iv(iv)
        padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
        padded = padder.update(plaintext) + padder.finalize()
        enc    = Cipher(algorithms.AES(self._key), modes.CBC(iv)).encryptor()
        ct     = enc.update(padded) + enc.finalize()
        return b"".join((iv, ct))

    def decrypt(self, data: bytes) -> bytes:
        self._check_envelope(data)
        view = memoryview(data)
        iv   = bytes(view[:self.IV_SIZE])
        ct   = view[self.IV_SIZE:]
        if not len(ct) or len(ct) % (self.BLOCK_BITS // 8):
            raise ValueError("CBC ciphertext is not a whole number of blocks")
        dec    = Cipher(
            algorithms.AES(self._key), modes.CBC(iv)
        ).decryptor()
        padded = dec.update(ct) + dec.finalize()
        unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
        return unpad.update(padded) + unpad.finalize()

    @property
    def cipher_name(self) -> str:
        return "aes-256-cbc"

    @property
    def key_size(self) -> int:
        return self.KEY_SIZE

    @property
    def iv_size(self) -> int:
        return self.IV_SIZE

    @property
    def is_aead(self) -> bool:
        return False
