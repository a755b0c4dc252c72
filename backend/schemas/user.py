from pydantic import BaseModel, EmailStr
from typing import Optional

from schemas.load import CamelModel

# Schema for user authentication credentials
class UserLogin(BaseModel):
    email: str
    password: str

# Schema for user registration requests
class UserCreate(BaseModel):
    username: Optional[str] = None
    email: EmailStr
    password: Optional[str] = None

# Output schema for user profile details
class UserResponse(CamelModel):
    id: int
    username: str
    email: str

# Token issued on login
class Token(BaseModel):
    token: str

# Registration logs the new driver in immediately
class RegisterResponse(CamelModel):
    message: str
    user_id: int
    token: str
