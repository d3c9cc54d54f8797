from pydantic import BaseModel


class MessageResponse(BaseModel):
    """DTO for a plain confirmation message"""
    message: str


class ErrorResponse(BaseModel):
    """DTO for an error body"""
    error: str
