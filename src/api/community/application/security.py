"""Password hashing for user credentials.

Uses bcrypt with a per-hash random salt. Plaintext passwords are never
stored or compared directly.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt.

    Args:
        password: The plaintext password

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its bcrypt hash.

    Uses bcrypt's constant-time checkpw.

    Args:
        password: The plaintext password to verify
        password_hash: The stored bcrypt hash

    Returns:
        True if the password matches, False otherwise (including a malformed hash)
    """
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        return False
