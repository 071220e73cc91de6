from typing import List, Optional
from pydantic import BaseModel


class ContactSubmission(BaseModel):
    id: str
    name: str
    email: str
    message: str
    date: str


class ContactIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool = True
    message: str


class SubmissionListResponse(BaseModel):
    submissions: List[ContactSubmission]
