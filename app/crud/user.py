from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.models import User
from app.schemas.schemas import UserRegister, UserUpdate
from app.core.security import dummy_verify, hash_password, verify_password

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def email_exists(db: Session, email: str) -> bool:
    return db.query(func.count(User.id)).filter(User.email == email).scalar() > 0

def create_user(db: Session, user_data: UserRegister) -> User:
    new_user = User(
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        mobile=user_data.mobile,
        country_id=user_data.country_id,
        password_hash=hash_password(user_data.password),
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    return new_user

def update_user(db: Session, user_id: int, data: UserUpdate) -> Optional[User]:
    """Write the fields that were sent. Returns None if the user is unknown or nothing changed."""
    user = get_user_by_id(db, user_id)
    if not user:
        return None

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        return None

    for key, value in update_data.items():
        setattr(user, key, value)

    db.commit()
    db.refresh(user)
    return user

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user:
        dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
