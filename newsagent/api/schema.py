from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class HealthResponse(BaseModel):
    status: str
    uptime: float
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    example: Optional[str] = None


class ToolListResponse(BaseModel):
    tools: List[Dict[str, Any]]


class ToolCallResponse(BaseModel):
    content: List[Dict[str, Any]]
