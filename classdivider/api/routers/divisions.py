# classdivider/api/routers/divisions.py
"""
Division endpoints: divide a posted class of students into groups.
"""
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from classdivider.domain.exceptions import (
    InfeasiblePartitionError,
    InvalidDeviationError,
    InvalidGroupSizeError,
)
from classdivider.domain.group import Group
from classdivider.domain.models import Student
from classdivider.services.division_service import DivisionService
from classdivider.services.presenter import display_name

router = APIRouter()


class StudentIn(BaseModel):
    first_name: str
    last_name: str
    id: str


class DivideReq(BaseModel):
    students: List[StudentIn]
    group_size: int
    deviation: Optional[int] = None
    seed: Optional[int] = None


class StudentOut(StudentIn):
    display_name: str


class DivideResp(BaseModel):
    groups: List[List[StudentOut]]
    unique_first_names: Dict[str, bool]


@router.post("/", response_model=DivideResp, summary="Divide a class of students into groups")
def create_division(req: DivideReq):
    service = DivisionService()
    students = Group(Student(**s.model_dump()) for s in req.students)

    try:
        division = service.divide(students, req.group_size, req.deviation, seed=req.seed)
    except (InvalidGroupSizeError, InvalidDeviationError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except InfeasiblePartitionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    groups = [
        [
            StudentOut(
                first_name=s.first_name,
                last_name=s.last_name,
                id=s.id,
                display_name=display_name(s, division.unique_first_names),
            )
            for s in group
        ]
        for group in division.groups
    ]
    return DivideResp(groups=groups, unique_first_names=division.unique_first_names)
