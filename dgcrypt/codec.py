"""
Dgcrypt codec — symmetric encryption to and from a single text envelope.

Envelope layout (before text encoding):

    AEAD  (aes-256-gcm, chacha20-poly1305):  [IV 12B][tag 16B][ciphertext]
    CBC   (aes-256-cbc):                     [IV 16B][ciphertext]

The envelope is encoded with standard base64 (RFC 4648 alphabet, ``=``
padding). It carries no header, so the method used to decrypt must be the
method used to encrypt.

Two ways in:

* ``Dgcrypt`` keeps method, key and IV on the instance and lazily creates
  an IV on first use. Instances are NOT internally synchronized; callers
  sharing one across threads must serialize access themselves.
* ``CodecConfig`` + ``seal`` / ``open_envelope`` take everything as
  arguments and keep no state. Passing a ``Nonce`` to ``seal`` guarantees
  that nonce is never used for a second message.

IV reuse hazard: with an AEAD method, calling ``Dgcrypt.encrypt`` twice
without ``reset_iv=True`` (or a fresh ``set_iv()``) encrypts both messages
under the same key and nonce, which breaks both confidentiality and
integrity. It is allowed for compatibility and logged as a warning.
"""

import base64
import binascii
import logging
from dataclasses import dataclass, field

from cryptography.exceptions import InvalidTag

from .config.settings import Settings
from .crypto_engine   import CipherFactory, HashCrypto
from .errors import (
    DecryptionFailedError,
    InvalidIVLengthError,
    InvalidKeyLengthError,
    MissingKeyError,
)
from .utils.random_gen import SecureRandom, Nonce

logger = logging.getLogger("Dgcrypt.Codec")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Byte / envelope helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _to_bytes(value, what: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"{what} must be str or bytes, not {type(value).__name__}"
    )


def _normalize_key(key) -> bytes:
    raw = _to_bytes(key, "key")
    if len(raw) != Settings.KEY_SIZE:
        raise InvalidKeyLengthError(
            f"Secret key should be {Settings.KEY_SIZE} bytes"
        )
    return raw


def _normalize_iv(method: str, iv) -> bytes:
    raw      = _to_bytes(iv, "iv")
    expected = CipherFactory.get_iv_size(method)
    if len(raw) != expected:
        raise InvalidIVLengthError(expected, method, len(raw))
    return raw


def _encode_envelope(envelope: bytes) -> str:
    return base64.b64encode(envelope).decode("ascii")


def _open(method: str, key: bytes, payload) -> bytes:
    """Decode and decrypt *payload*; every failure → DecryptionFailedError."""
    if not isinstance(payload, (str, bytes, bytearray)):
        raise TypeError(
            f"payload must be str or bytes, not {type(payload).__name__}"
        )
    cipher = CipherFactory.create(method, key)
    try:
        envelope = base64.b64decode(payload, validate=True)
        return cipher.decrypt(envelope)
    except (InvalidTag, binascii.Error, ValueError):
        # one message for tag, padding and framing failures alike
        logger.debug("Decryption failed (%s)", method)
        raise DecryptionFailedError() from None


def _decode_text(plaintext: bytes, method: str) -> str:
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Decryption failed (%s): not UTF-8", method)
        raise DecryptionFailedError() from None


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Immutable configuration + pure functions
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class CodecConfig:
    """
    Method, key and optional fixed IV for ``seal`` / ``open_envelope``.

    - method: one of CipherFactory.list_ciphers()
    - key:    32 bytes (str keys are UTF-8 encoded first)
    - iv:     optional, must match the method's IV length
    """

    method: str
    key:    bytes = field(repr=False)
    iv:     bytes | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        CipherFactory.is_aead(self.method)          # validates the method
        object.__setattr__(self, "key", _normalize_key(self.key))
        if self.iv is not None:
            object.__setattr__(
                self, "iv", _normalize_iv(self.method, self.iv)
            )

    @classmethod
    def generate(cls, method: str = Settings.DEFAULT_METHOD) -> "CodecConfig":
        """Build a config with a fresh random key and no fixed IV."""
        return cls(method, SecureRandom.generate_key(Settings.KEY_SIZE))

    @property
    def iv_length(self) -> int:
        return CipherFactory.get_iv_size(self.method)

    @property
    def tag_length(self) -> int:
        return CipherFactory.get_tag_size(self.method)


def seal(config: CodecConfig, plaintext, nonce: Nonce | None = None) -> str:
    """
    Encrypt *plaintext* (str or bytes) and return the base64 envelope.

    IV source, first match wins: *nonce* (consumed, so a second seal with
    the same Nonce raises NonceReuseError), ``config.iv``, a random IV.
    """
    data = _to_bytes(plaintext, "plaintext")
    if nonce is not None:
        if len(nonce) != config.iv_length:
            raise InvalidIVLengthError(
                config.iv_length, config.method, len(nonce)
            )
        iv = nonce.consume()
    elif config.iv is not None:
        iv = config.iv
    else:
        iv = SecureRandom.generate_iv(config.iv_length)

    cipher = CipherFactory.create(config.method, config.key)
    return _encode_envelope(cipher.encrypt(data, iv))


def open_envelope(config: CodecConfig, payload) -> str:
    """Decrypt a base64 envelope produced by ``seal`` or ``Dgcrypt``."""
    return _decode_text(_open(config.method, config.key, payload),
                        config.method)


def open_envelope_bytes(config: CodecConfig, payload) -> bytes:
    return _open(config.method, config.key, payload)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Stateful codec
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Dgcrypt:
    """
    Holds a cipher method, a 32-byte key and an IV.

    Keys are exact-length: a str key must be 32 bytes once UTF-8 encoded,
    a bytes key must be 32 bytes. Nothing is hashed, padded or truncated.
    Use ``HashCrypto.derive_key`` explicitly to turn a passphrase into a
    key.

    All setters return the instance so calls can be chained::

        Dgcrypt("aes-256-gcm").set_key(key).encrypt("hello", reset_iv=True)
    """

    def __init__(self, method: str = Settings.DEFAULT_METHOD,
                 key=None, iv=None):
        self._method: str        = Settings.DEFAULT_METHOD
        self._key: bytes | None  = None
        self._iv: bytes | None   = None
        self._iv_used_with: set[bytes] = set()
        self.set_method(method)
        if key is not None:
            self.set_key(key)
        if iv is not None:
            self.set_iv(iv)

    def __repr__(self) -> str:
        return (f"<Dgcrypt method={self._method} "
                f"key={'set' if self._key else 'unset'} "
                f"iv={'set' if self._iv else 'unset'}>")

    # ── configuration ────────────────────────────────────────────

    def set_method(self, method: str) -> "Dgcrypt":
        """Select the cipher; raises UnsupportedMethodError if unknown."""
        iv_size = CipherFactory.get_iv_size(method)
        if self._iv is not None and len(self._iv) != iv_size:
            logger.debug("Dropping %d-byte IV after switch to %s",
                         len(self._iv), method)
            self._iv = None
            self._iv_used_with.clear()
        self._method = method
        return self

    # kept for callers of the older name
    set_cipher_method = set_method

    def set_key(self, key) -> "Dgcrypt":
        """Install a 32-byte key (str is UTF-8 encoded first)."""
        self._key = _normalize_key(key)
        logger.debug("Key installed (%d bits)", len(self._key) * 8)
        return self

    def generate_key(self) -> bytes:
        """
        Install a random 32-byte key and return it.

        The returned bytes can be passed back to ``set_key``, ``encrypt``
        or ``decrypt`` unchanged. ``key_hex`` gives a printable form.
        """
        self._key = SecureRandom.generate_key(Settings.KEY_SIZE)
        logger.debug("Generated random key")
        return self._key

    def set_iv(self, iv=None) -> "Dgcrypt":
        """
        Install an IV, or a random one when *iv* is omitted or empty.

        A given IV must be exactly ``iv_length`` bytes (16 for CBC, 12 for
        GCM / ChaCha20-Poly1305), else InvalidIVLengthError.
        """
        if not iv:
            self._iv = SecureRandom.generate_iv(self.iv_length)
            logger.debug("Generated %d-byte IV for %s",
                         self.iv_length, self._method)
        else:
            self._iv = _normalize_iv(self._method, iv)
        self._iv_used_with.clear()
        return self

    def snapshot(self) -> CodecConfig:
        """Freeze the current method, key and IV into a CodecConfig."""
        if self._key is None:
            raise MissingKeyError("Secret key is not defined")
        return CodecConfig(self._method, self._key, self._iv)

    @classmethod
    def from_config(cls, config: CodecConfig) -> "Dgcrypt":
        return cls(config.method, config.key, config.iv)

    @staticmethod
    def key_from_hex(text: str) -> bytes:
        """Inverse of ``key_hex``."""
        return bytes.fromhex(text)

    # ── read-only state ──────────────────────────────────────────

    @property
    def method(self) -> str:
        return self._method

    @property
    def iv(self) -> bytes | None:
        return self._iv

    @property
    def has_key(self) -> bool:
        return self._key is not None

    @property
    def key_hex(self) -> str | None:
        return self._key.hex() if self._key is not None else None

    @property
    def iv_length(self) -> int:
        return CipherFactory.get_iv_size(self._method)

    @property
    def tag_length(self) -> int:
        return CipherFactory.get_tag_size(self._method)

    @property
    def is_aead(self) -> bool:
        return CipherFactory.is_aead(self._method)

    # ── transforms ───────────────────────────────────────────────

    def _install_key(self, key):
        # empty or None falls back to the installed key, like an omitted IV
        if key:
            self.set_key(key)
        elif self._key is None:
            raise MissingKeyError("Secret key is not defined")

    def encrypt(self, data, key=None, reset_iv: bool = False) -> str:
        """
        Encrypt *data* (str or bytes) and return the base64 envelope.

        An empty *key* behaves like an omitted one. With ``reset_iv=True``
        the IV is cleared afterwards, so the next call generates a fresh
        one. The key is never cleared.
        """
        self._install_key(key)
        if self._iv is None:
            self.set_iv()

        # keys that already encrypted under the current IV; only a new IV
        # empties this, switching keys back and forth does not
        fingerprint = HashCrypto.sha256(self._key)
        if fingerprint in self._iv_used_with and self.is_aead:
            logger.warning(
                "Reusing the same IV under the same key with %s; "
                "pass reset_iv=True or call set_iv() between messages",
                self._method,
            )

        cipher = CipherFactory.create(self._method, self._key)
        result = _encode_envelope(
            cipher.encrypt(_to_bytes(data, "data"), self._iv)
        )
        self._iv_used_with.add(fingerprint)

        if reset_iv:
            self._iv = None
            self._iv_used_with.clear()
        return result

    def decrypt(self, payload, key=None) -> str:
        """Decrypt a base64 envelope back to the original text."""
        return _decode_text(self.decrypt_bytes(payload, key), self._method)

    def decrypt_bytes(self, payload, key=None) -> bytes:
        """Decrypt a base64 envelope to raw bytes."""
        self._install_key(key)
        return _open(self._method, self._key, payload)
