"""
Dgcrypt — AES-256-CBC, AES-256-GCM and ChaCha20-Poly1305 encryption to
a single base64 string, on top of the ``cryptography`` package.
"""

from .codec import (
    Dgcrypt,
    CodecConfig,
    seal,
    open_envelope,
    open_envelope_bytes,
)
from .crypto_engine import CipherFactory, HashCrypto
from .utils.random_gen import Nonce, SecureRandom
from .errors import (
    DgcryptError,
    UnsupportedMethodError,
    InvalidKeyLengthError,
    InvalidIVLengthError,
    MissingKeyError,
    NonceReuseError,
    DecryptionFailedError,
)
from .config.settings import Settings

__all__ = [
    "Dgcrypt", "CodecConfig", "seal", "open_envelope", "open_envelope_bytes",
    "CipherFactory", "HashCrypto", "Nonce", "SecureRandom", "Settings",
    "DgcryptError", "UnsupportedMethodError", "InvalidKeyLengthError",
    "InvalidIVLengthError", "MissingKeyError", "NonceReuseError",
    "DecryptionFailedError",
]

__version__ = Settings.APP_VERSION
