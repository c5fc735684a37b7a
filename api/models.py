from pydantic import BaseModel
from typing import Optional

class ReviewRequest(BaseModel):
    # Missing fields are reported by ReviewProcessor.validate
    code: Optional[str] = None
    language: Optional[str] = None

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    llm_configured: bool
