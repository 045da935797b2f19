import os

# We operate within a 31-bit integer space (positive integers for a 32-bit signed int).
MAX_ID: int = 2**31 - 1

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    """Centralized configuration with validation"""
    APP_TITLE: str = os.getenv("APP_TITLE", "ID Obfuscator")

    # Transform parameters. Keep these secret and identical everywhere ids are decoded.
    OBFUSCATION_PRIME: int = _int_env("OBFUSCATION_PRIME", 1580030173)
    # Derived from OBFUSCATION_PRIME when unset.
    OBFUSCATION_MOD_INVERSE: int | None = _int_env("OBFUSCATION_MOD_INVERSE", None)
    OBFUSCATION_RANDOM: int = _int_env("OBFUSCATION_RANDOM", 1163945558)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR: str | None = os.getenv("LOG_DIR") or None

    @classmethod
    def validate(cls):
        """Validate configuration on startup"""
        for name in ("OBFUSCATION_PRIME", "OBFUSCATION_RANDOM"):
            value = getattr(cls, name)
            if not 0 <= value <= MAX_ID:
                raise ValueError(f"{name} must be between 0 and {MAX_ID}")
        if cls.OBFUSCATION_PRIME % 2 == 0:
            raise ValueError("OBFUSCATION_PRIME must be an odd prime")
        if cls.OBFUSCATION_MOD_INVERSE is not None and not 0 <= cls.OBFUSCATION_MOD_INVERSE <= MAX_ID:
            raise ValueError(f"OBFUSCATION_MOD_INVERSE must be between 0 and {MAX_ID}")
        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be a standard logging level name")

# ============================================================================
# SINGLETON INSTANCE & DERIVED CONSTANTS
# ============================================================================

config = Config()

# --- Expose class attributes as module constants for convenience ---
for attr in [a for a in dir(config) if not a.startswith('__') and not callable(getattr(config, a))]:
    globals()[attr] = getattr(config, attr)
