# =============================================================================
# pr_reviewer/api/endpoints/pull_requests.py
# =============================================================================
from fastapi import APIRouter, Depends, status
from pr_reviewer.api.deps import get_pull_request_service
from pr_reviewer.services.pull_request_service import PullRequestService
from pr_reviewer.schemas.pull_request import (
    CreatePRRequest,
    MergePRRequest,
    ReassignRequest,
    PullRequestEnvelope,
    PullRequestResponse,
    ReassignResponse,
)
from pr_reviewer.core.exceptions import ReviewServiceError, InternalError
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "pull_requests.log")

router = APIRouter()

@router.post("/create", response_model=PullRequestEnvelope, status_code=status.HTTP_201_CREATED)
def create_pull_request(
    request: CreatePRRequest,
    service: PullRequestService = Depends(get_pull_request_service)
):
    """
    Create a pull request and assign up to two reviewers from the author's team
    """
    try:
        logger.info(f"Create pull request {request.pull_request_id} by {request.author_id}")
        pull_request = service.create_pull_request(
            request.pull_request_id,
            request.pull_request_name,
            request.author_id,
        )
        return PullRequestEnvelope(pr=PullRequestResponse.model_validate(pull_request))
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating {request.pull_request_id}: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.post("/merge", response_model=PullRequestEnvelope, status_code=status.HTTP_200_OK)
def merge_pull_request(
    request: MergePRRequest,
    service: PullRequestService = Depends(get_pull_request_service)
):
    """
    Merge a pull request (idempotent)
    """
    try:
        pull_request = service.merge_pull_request(request.pull_request_id)
        return PullRequestEnvelope(pr=PullRequestResponse.model_validate(pull_request))
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error merging {request.pull_request_id}: {str(e)}", exc_info=True)
        raise InternalError(str(e))

@router.post("/reassign", response_model=ReassignResponse, status_code=status.HTTP_200_OK)
def reassign_reviewer(
    request: ReassignRequest,
    service: PullRequestService = Depends(get_pull_request_service)
):
    """
    Replace one reviewer with another eligible member of the author's team
    """
    try:
        logger.info(f"Reassign {request.old_user_id} on {request.pull_request_id}")
        pull_request, replaced_by = service.reassign_reviewer(
            request.pull_request_id,
            request.old_user_id,
        )
        return ReassignResponse(
            pr=PullRequestResponse.model_validate(pull_request),
            replaced_by=replaced_by,
        )
    except ReviewServiceError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error reassigning on {request.pull_request_id}: {str(e)}", exc_info=True)
        raise InternalError(str(e))
