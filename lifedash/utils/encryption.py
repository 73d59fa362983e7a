# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

import json
import logging
from typing import Optional

from cryptography.fernet import Fernet
from sqlalchemy.types import TypeDecorator, Text

from lifedash import config

logger = logging.getLogger(__name__)


def build_fernet(secret: Optional[str]) -> Optional[Fernet]:
    if not secret:
        logger.warning("⚠️ FERNET_SECRET is not set. Documents are stored as plain JSON.")
        return None
    try:
        return Fernet(secret)
    except Exception as e:
        raise ValueError("FERNET_SECRET is invalid. Make sure it is a valid 32-byte base64 string.") from e


# 🔐 Encrypt/Decrypt helpers
def encrypt(fernet: Optional[Fernet], text: str) -> str:
    if fernet is None:
        return text
    return fernet.encrypt(text.encode()).decode()


def decrypt(fernet: Optional[Fernet], token: str) -> str:
    if fernet is None:
        return token
    return fernet.decrypt(token.encode()).decode()


# 🧩 JSON document column, encrypted when a secret is configured
class EncryptedJSON(TypeDecorator):
    impl = Text
    cache_ok = True

    _fernet = None
    _loaded = False

    @classmethod
    def configure(cls, secret: Optional[str]):
        cls._fernet = build_fernet(secret)
        cls._loaded = True

    @classmethod
    def fernet(cls) -> Optional[Fernet]:
        if not cls._loaded:
            cls.configure(config.FERNET_SECRET)
        return cls._fernet

    def process_bind_param(self, value, dialect):
        if value is not None:
            return encrypt(self.fernet(), json.dumps(value, ensure_ascii=False))
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return json.loads(decrypt(self.fernet(), value))
        return value
