"""Password hashing utilities."""

from passlib.context import CryptContext

# New hashes use bcrypt_sha256, which pre-hashes with SHA-256 so passwords
# longer than bcrypt's 72 bytes are not truncated. Plain bcrypt hashes from
# accounts imported out of the earlier catalog still verify, and are flagged
# by needs_update so login can replace them.
pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash of any accepted scheme."""
    return pwd_context.verify(plain_password, hashed_password)


def needs_update(hashed_password: str) -> bool:
    """True when the hash uses a deprecated scheme or outdated settings."""
    return pwd_context.needs_update(hashed_password)
