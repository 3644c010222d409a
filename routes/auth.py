import logging
from datetime import datetime
from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordBearer
from pymongo.errors import DuplicateKeyError

from auth_utils import create_access_token, decode_access_token, hash_password, verify_password
from database import USERS, get_collection
from models.user import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse, UserOut
from utils.serializers import parse_object_id

router = APIRouter(prefix="/api", tags=["Authentication"])
logger = logging.getLogger(__name__)

# OAuth2PasswordBearer for token authentication (used for protected routes)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")


def _user_out(user: dict) -> UserOut:
    return UserOut(
        id=str(user["_id"]),
        username=user["username"],
        email=user["email"],
        address=user.get("address"),
        state=user.get("state"),
        role=user.get("role", "user"),
    )


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED, summary="Create a user account")
async def register(request: RegisterRequest):
    users_collection = get_collection(USERS)
    email = request.email.lower()
    if await users_collection.find_one({"email": email}):
        raise HTTPException(status_code=400, detail="User already exists")

    new_user = {
        "username": request.username,
        "email": email,
        "address": request.address,
        "state": request.state,
        "passwordHash": hash_password(request.password),
        "role": "user",
        "createdAt": datetime.utcnow(),
    }
    try:
        result = await users_collection.insert_one(new_user)
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="User already exists")
    new_user["_id"] = result.inserted_id
    logger.info(f"New user {email} registered. User ID: {result.inserted_id}")
    return {"message": "Registration successful", "user": _user_out(new_user)}


@router.post("/login", response_model=LoginResponse, summary="Log in with username or email")
async def login(request: LoginRequest):
    users_collection = get_collection(USERS)
    if request.email:
        user = await users_collection.find_one({"email": request.email.lower()})
    else:
        user = await users_collection.find_one({"username": request.username})

    identity = request.email or request.username
    if not user or not verify_password(request.password, user.get("passwordHash")):
        logger.warning(f"Failed login attempt for {identity}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    await users_collection.update_one({"_id": user["_id"]}, {"$set": {"lastLoginAt": datetime.utcnow()}})
    access_token = create_access_token(data={"sub": str(user["_id"])})
    logger.info(f"Login successful for {identity}")
    return {"message": "Login successful", "user": _user_out(user), "access_token": access_token}


async def get_current_user(token: str = Depends(oauth2_scheme)) -> UserOut:
    """
    Dependency to get the current authenticated user from the JWT token.
    """
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    user_id = decode_access_token(token)
    if user_id is None:
        raise credentials_error
    try:
        object_id = parse_object_id(user_id)
    except HTTPException:
        raise credentials_error

    user = await get_collection(USERS).find_one({"_id": object_id})
    if not user:
        raise credentials_error
    return _user_out(user)


@router.get("/users/me", response_model=UserOut, summary="Get current user information (Protected)")
async def read_users_me(current_user: UserOut = Depends(get_current_user)):
    return current_user
