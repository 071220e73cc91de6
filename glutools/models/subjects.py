from typing import List
from pydantic import BaseModel


class Subject(BaseModel):
    id: str
    name: str
    description: str = ""


class SubjectListResponse(BaseModel):
    subjects: List[Subject]
