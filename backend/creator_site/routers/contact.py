"""
Contact Form Endpoints

Public submission plus the full submission log.
"""

from fastapi import APIRouter, Body, Depends, Request, status
from typing import Any, Dict, List

from creator_site.models.schemas import ContactSubmissionResponse
from creator_site.routers.deps import get_directory
from creator_site.services.directory import ContentDirectory

router = APIRouter()


@router.post("", response_model=ContactSubmissionResponse, status_code=status.HTTP_201_CREATED)
def submit_contact_form(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    directory: ContentDirectory = Depends(get_directory)
):
    """
    Submit the contact form.

    ``ip_address`` and ``user_agent`` sent in the body are stored verbatim.
    When a key is missing, the client address or the User-Agent header is
    used instead. Any ``status`` in the body is ignored.
    """
    submission = dict(payload)
    if "ip_address" not in submission:
        submission["ip_address"] = request.client.host if request.client else None
    if "user_agent" not in submission:
        submission["user_agent"] = request.headers.get("user-agent")

    return directory.contact_submissions.create(submission)


@router.get("", response_model=List[ContactSubmissionResponse])
def list_contact_submissions(directory: ContentDirectory = Depends(get_directory)):
    """All submissions, most recent first."""
    return directory.contact_submissions.list_all()
