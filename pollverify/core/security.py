"""Password hashing for poll worker and admin accounts"""
import bcrypt

BCRYPT_ROUNDS = 12


def get_password_hash(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a password with a fresh salt"""
    hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds))
    return hashed.decode('utf-8')


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a password against a stored hash; a malformed hash never matches"""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False
