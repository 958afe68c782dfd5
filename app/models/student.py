from pydantic import BaseModel, Field
from typing import Optional


class StudentBase(BaseModel):
    name: str
    grade_level: int
    email: Optional[str] = None


class StudentCreate(StudentBase):
    # Assigned by the store when omitted; must fit in a single path segment
    id: Optional[str] = Field(None, min_length=1, pattern=r"^[^/]+$")


class StudentUpdate(StudentBase):
    """Whole-record replacement. Any id in the body is ignored."""
    id: Optional[str] = None


class Student(StudentBase):
    id: str

    class Config:
        from_attributes = True
