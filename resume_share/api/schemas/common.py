from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Envelope for every JSON endpoint. Routes are declared with
    response_model_exclude_unset=True, so fields a handler never sets are
    left out of the body while an explicit None is sent as null.
    """
    success: bool
    message: Optional[str] = None
    result: Optional[T] = None
    error: Optional[str] = None
