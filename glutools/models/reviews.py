from typing import List, Optional, Union
from pydantic import BaseModel, Field, StrictFloat, StrictInt


class Review(BaseModel):
    id: str
    tool_id: str
    author_name: str = "Anonymous"
    rating: int = Field(..., ge=1, le=5)
    comment: str
    created_at: str
    helpful_count: int = Field(default=0, ge=0)


class ReviewIn(BaseModel):
    tool_id: Optional[str] = None
    author_name: Optional[str] = None
    # number or numeric string, parsed and clamped to 1..5; booleans are rejected
    rating: Optional[Union[StrictInt, StrictFloat, str]] = None
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    review: Review


class ReviewListResponse(BaseModel):
    reviews: List[Review]


class HelpfulResponse(BaseModel):
    success: bool = True
    helpful_count: int
