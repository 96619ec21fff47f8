"""bcrypt implementation of PasswordHasher."""

import bcrypt

DEFAULT_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash password using bcrypt with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode('utf-8'), salt).decode('utf-8')

    def verify(self, plaintext: str, stored_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash.

        Unparsable hashes and inputs bcrypt refuses count as a mismatch.
        """
        if not stored_hash:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode('utf-8'), stored_hash.encode('utf-8'))
        except (ValueError, TypeError):
            return False
