"""Authentication routes for user registration and login."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentalhaven.core.database import get_db
from rentalhaven.schemas.user import AuthResponse, LoginRequest, UserCreate, UserResponse
from rentalhaven.services.auth import (
    authenticate_user,
    create_user,
    get_current_user,
    placeholder_token,
)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    user = create_user(db, user_data)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=placeholder_token(),
        message="User registered successfully",
    )


@router.post("/login", response_model=AuthResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Check credentials and return the user with the placeholder token."""
    user = authenticate_user(db, login_data.email, login_data.password)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=placeholder_token(),
        message="Login successful",
    )


@router.get("/me", response_model=UserResponse)
def me(email: str, db: Session = Depends(get_db)):
    """Look up a user by email."""
    return get_current_user(db, email)
