from passlib.context import CryptContext
from sqlalchemy.orm import Session

from letsgo.models.user import User

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


# ---------- PASSWORD ENCRYPTION ----------
def hash_password(password: str):
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str):
    return pwd_context.verify(password, hashed)


# ---------- SIGN IN ----------
def authenticate_user(db: Session, email: str, password: str):
    """Return the staff member for these credentials, or None"""
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password_hash):
        return None
    return user
