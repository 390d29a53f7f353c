from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """
    Standard error envelope.
    Every non-2xx response from the API has this shape.
    """
    error: ErrorDetail
