# app/api/routes_auth.py

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.security import Authenticated, create_user_token
from app.crud import country as crud_country
from app.crud import user as crud_user
from app.db.deps import clear_auth_cookie, get_current_user, get_db, set_auth_cookie
from app.schemas.schemas import UserLogin, UserOut, UserRegister, UserUpdate
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register_user(data: UserRegister, response: Response, db: Session = Depends(get_db)):
    if crud_user.email_exists(db, data.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    if not crud_country.get_country_by_id(db, data.country_id):
        raise HTTPException(status_code=400, detail="Invalid country")

    try:
        user = crud_user.create_user(db, data)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")
    except Exception as e:
        db.rollback()
        logger.error(f"Registration failed: {e}")
        raise HTTPException(status_code=500, detail="Registration failed")

    logger.info(f"User {user.id} registered")
    set_auth_cookie(response, create_user_token(user.id, user.email))
    return {
        "success": True,
        "message": "Registration successful",
        "data": {"userId": user.id, "email": user.email},
    }

@router.post("/login")
def login_user(data: UserLogin, response: Response, db: Session = Depends(get_db)):
    try:
        user = crud_user.authenticate_user(db, data.email, data.password)
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(status_code=500, detail="Login failed")

    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    set_auth_cookie(response, create_user_token(user.id, user.email))
    return {
        "success": True,
        "message": "Login successful",
        "data": {
            "userId": user.id,
            "email": user.email,
            "firstName": user.first_name,
            "lastName": user.last_name,
        },
    }

@router.post("/logout")
def logout_user(response: Response):
    clear_auth_cookie(response)
    return {"success": True, "message": "Logout successful"}

@router.get("/me")
def read_me(db: Session = Depends(get_db), current: Authenticated = Depends(get_current_user)):
    user = crud_user.get_user_by_id(db, current.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {"success": True, "data": UserOut.model_validate(user)}

@router.put("/me")
def update_me(
    data: UserUpdate,
    response: Response,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    if data.email:
        owner = crud_user.get_user_by_email(db, data.email)
        if owner and owner.id != current.user_id:
            raise HTTPException(status_code=409, detail="Email already registered")
    if data.country_id is not None and not crud_country.get_country_by_id(db, data.country_id):
        raise HTTPException(status_code=400, detail="Invalid country")

    try:
        user = crud_user.update_user(db, current.user_id, data)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")
    except Exception as e:
        db.rollback()
        logger.error(f"Profile update failed for user {current.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update profile")

    if not user:
        if not crud_user.get_user_by_id(db, current.user_id):
            raise HTTPException(status_code=404, detail="User not found")
        raise HTTPException(status_code=400, detail="No fields to update")

    # Token carries the email, reissue it when that changes
    if user.email != current.email:
        set_auth_cookie(response, create_user_token(user.id, user.email))

    return {"success": True, "message": "Profile updated", "data": UserOut.model_validate(user)}
