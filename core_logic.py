import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from fastapi import HTTPException, status

import config

# --- LOGGING SETUP ---

def setup_logging(log_dir: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """Configure structured logging with optional file rotation"""
    logger = logging.getLogger("id_obfuscator")
    # Unknown names are reported by Config.validate() at startup.
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, "app.log"),
                maxBytes=10_485_760,
                backupCount=5
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

logger = setup_logging(config.LOG_DIR, config.LOG_LEVEL)

# --- OBFUSCATION ERRORS ---

class ObfuscationError(ValueError):
    """Base class for every error raised while building or using a Transform."""


class OutOfRange(ObfuscationError):
    def __init__(self, name: str, value: int, max_value: int = config.MAX_ID):
        self.name = name
        self.value = value
        super().__init__(f"{name}={value} is outside the valid range [0, {max_value}]")


class InvalidModularInverse(ObfuscationError):
    def __init__(self, prime: int, mod_inverse: int):
        self.prime = prime
        self.mod_inverse = mod_inverse
        super().__init__(f"{mod_inverse} is not the modular inverse of {prime} modulo 2**31")


class NoInverseExists(ObfuscationError):
    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value} has no multiplicative inverse modulo {modulus}")

# --- HTTP EXCEPTIONS ---

class ValidationException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
