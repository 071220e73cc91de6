from fastapi import APIRouter, Depends

from glutools.core.deps import get_contact_repository
from glutools.core.errors import failure_message
from glutools.models.contact import ContactIn, ContactResponse, SubmissionListResponse
from glutools.services.repositories import ContactRepository

router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactResponse)
def submit_contact(payload: ContactIn, submissions: ContactRepository = Depends(get_contact_repository)):
    with failure_message("Failed to submit contact form"):
        submissions.create(payload.model_dump(exclude_none=True))
        return {"success": True, "message": "Contact form submitted successfully"}


@router.get("/contact-submissions", response_model=SubmissionListResponse)
def list_submissions(submissions: ContactRepository = Depends(get_contact_repository)):
    with failure_message("Failed to fetch contact submissions"):
        return {"submissions": submissions.list_all()}
