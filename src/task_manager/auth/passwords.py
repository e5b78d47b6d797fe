from __future__ import annotations

from passlib.context import CryptContext

PWD_CTX = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return PWD_CTX.hash(password)


def verify_password(password: str, digest: str) -> bool:
    return PWD_CTX.verify(password, digest)
