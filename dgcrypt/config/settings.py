import os


class Settings:
    """Centralised library configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "Dgcrypt"
    APP_VERSION = "1.0.0"

    # ── crypto defaults ──────────────────────────────────────────
    DEFAULT_METHOD = "aes-256-cbc"
    KEY_SIZE       = 32          # 256 bits

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL   = os.environ.get("DGCRYPT_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT  = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATEFMT = "%H:%M:%S"
