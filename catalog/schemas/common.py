from pydantic import BaseModel, Field
from typing import Generic, TypeVar

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    success: bool = Field(True, description="Always true for successful responses")
    data: T


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Error category", examples=["VALIDATION_ERROR"])
    message: str = Field(..., description="Machine-readable error message", examples=["pageSizeInvalid"])


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false for error responses")
    error: ErrorDetail
    
    @classmethod
    def build(cls, code: str, message: str) -> "ErrorResponse":
        return cls(error=ErrorDetail(code=code, message=message))
