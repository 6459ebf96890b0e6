from pydantic import BaseModel
from typing import List

class ErrorMessage(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    errors: List[ErrorMessage]

class AuthErrorResponse(BaseModel):
    message: str

class AuthFailedResponse(BaseModel):
    auth: bool = False
    message: str

class HealthResponse(BaseModel):
    status: str
    auth: bool
