"""
Dgcrypt Crypto Engine — symmetric cipher primitives and hashing.
"""

from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESGCMCipher, AESCBCCipher
from .chacha_crypto  import ChaCha20Cipher
from .hash_crypto    import HashCrypto
from .cipher_factory import CipherFactory

__all__ = [
    "SymmetricCipher", "CipherFactory", "HashCrypto",
    "AESGCMCipher", "AESCBCCipher", "ChaCha20Cipher",
]
