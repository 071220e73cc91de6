from fastapi import APIRouter, Depends

from glutools.core.deps import get_subject_repository
from glutools.core.errors import failure_message
from glutools.models.subjects import SubjectListResponse
from glutools.services.repositories import SubjectRepository

router = APIRouter(prefix="/subjects", tags=["subjects"])


@router.get("", response_model=SubjectListResponse)
def list_subjects(subjects: SubjectRepository = Depends(get_subject_repository)):
    with failure_message("Failed to fetch subjects"):
        return {"subjects": subjects.list_all()}
