"""
TourGuide Backend — Password Hashing
======================================

bcrypt with a per-password random salt. The cost factor of 12 matches the
common default; the hash string embeds algorithm, cost and salt, so
verification needs nothing but the stored value (bcrypt.checkpw).
"""

import bcrypt

BCRYPT_ROUNDS = 12


def hash_password(password: str) -> str:
    """Hash a plaintext password for storage. CPU-bound; call off the event loop."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
