from fastapi import APIRouter, Depends

from glutools.core.deps import get_review_repository
from glutools.core.errors import failure_message
from glutools.models.common import SuccessResponse
from glutools.models.reviews import HelpfulResponse, ReviewIn, ReviewListResponse, ReviewResponse
from glutools.services.repositories import ReviewRepository

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("", response_model=ReviewListResponse)
def list_reviews(reviews: ReviewRepository = Depends(get_review_repository)):
    with failure_message("Failed to fetch reviews"):
        return {"reviews": reviews.list_all()}


@router.get("/{tool_id}", response_model=ReviewListResponse)
def list_tool_reviews(tool_id: str, reviews: ReviewRepository = Depends(get_review_repository)):
    with failure_message("Failed to fetch reviews"):
        return {"reviews": reviews.list_by_foreign_key(tool_id)}


@router.post("", response_model=ReviewResponse)
def create_review(payload: ReviewIn, reviews: ReviewRepository = Depends(get_review_repository)):
    with failure_message("Failed to create review"):
        return {"review": reviews.create(payload.model_dump(exclude_none=True))}


@router.post("/{review_id}/helpful", response_model=HelpfulResponse)
def mark_helpful(review_id: str, reviews: ReviewRepository = Depends(get_review_repository)):
    with failure_message("Failed to mark review as helpful"):
        review = reviews.mark_helpful(review_id)
        return {"success": True, "helpful_count": review["helpful_count"]}


@router.delete("/{review_id}", response_model=SuccessResponse)
def delete_review(review_id: str, reviews: ReviewRepository = Depends(get_review_repository)):
    with failure_message("Failed to delete review"):
        reviews.delete(review_id)
        return {"success": True}
