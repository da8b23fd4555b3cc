# auth.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from jobly.config import is_admin_email
from jobly.database import get_db
from jobly.models.user import User
from jobly.schemas.user import Token, UserCreate, UserLogin, UserRead
from jobly.utils.jwt_handler import create_access_token
from jobly.utils.password_hash import hash_password, verify_password


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    user = User(
        email=user_in.email,
        password=hash_password(user_in.password),
        name=user_in.name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.register user_id=%s", user.id)
    user_out = UserRead.model_validate(user)
    return user_out.model_copy(update={"is_admin": is_admin_email(user.email)})


@router.post("/login", response_model=Token)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Token:
    user = db.query(User).filter(User.email == user_in.email).first()
    if not user or not verify_password(user_in.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(user.id)
    logger.info("auth.login user_id=%s", user.id)
    return Token(access_token=token, token_type="bearer")
