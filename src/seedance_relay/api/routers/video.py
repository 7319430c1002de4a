"""
Video generation relay endpoints.

Both relay endpoints are plain ``def`` handlers so FastAPI runs the blocking
secret store and Replicate calls in its threadpool.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ..models.common import APIError
from ..models.video import CreateVideoResponse, TaskStatus
from ..dependencies.relay import get_relay_service
from seedance_relay.models.relay import RelayService
from seedance_relay.models.providers.base import ErrorKind, RelayError

logger = logging.getLogger(__name__)

router = APIRouter()

TEST_RESPONSE = {
    "taskId": "test-1116",
    "status": "succeeded",
    "output_url": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4",
    "message": "This is a test response"
}

GENERIC_DETAILS = {
    ErrorKind.AUTH: "The upstream service rejected our credentials",
    ErrorKind.UPSTREAM_UNAVAILABLE: "The upstream service is unavailable",
    ErrorKind.UPSTREAM_REJECTED: "The upstream service rejected the request",
}


def _error_response(status_code: int, error: str, details: Optional[str] = None,
                    kind: Optional[ErrorKind] = None) -> JSONResponse:
    body = APIError(error=error, details=details, kind=kind.value if kind else None)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _upstream_failure(error: str, exc: Exception, relay: RelayService) -> JSONResponse:
    kind = exc.kind if isinstance(exc, RelayError) else ErrorKind.UPSTREAM_REJECTED
    if relay.config.expose_error_details:
        details = str(exc)
    else:
        details = GENERIC_DETAILS[kind]
    return _error_response(500, error, details, kind)


@router.get("/createVideo", response_model=CreateVideoResponse,
            responses={400: {"model": APIError}, 500: {"model": APIError}})
def create_video(
    prompt: Optional[str] = Query(None, description="Text prompt for the video"),
    imageUrl: Optional[str] = Query(None, description="URL of the input image"),
    resolution: Optional[str] = Query(None, description="Video resolution, defaults to the configured value"),
    relay: RelayService = Depends(get_relay_service)
):
    """Start an image-to-video generation task on the remote API."""
    if not prompt or not imageUrl:
        return _error_response(400, "Missing required parameters: prompt and imageUrl", kind=ErrorKind.VALIDATION)

    try:
        task_id = relay.create_task(prompt, imageUrl, resolution)
    except Exception as e:
        logger.exception(f"Error in /api/createVideo: {e}")
        return _upstream_failure("Failed to create video generation task", e, relay)

    return CreateVideoResponse(taskId=task_id)


@router.get("/checkStatus", response_model=TaskStatus, response_model_exclude_unset=True,
            responses={400: {"model": APIError}, 500: {"model": APIError}})
def check_status(
    taskId: Optional[str] = Query(None, description="The task id returned by createVideo"),
    relay: RelayService = Depends(get_relay_service)
):
    """
    Relay the current status of a remote task.

    A task the remote service reports as failed is still a 200 response, with
    the remote reason in ``error``.
    """
    if not taskId:
        return _error_response(400, "Missing required parameter: taskId", kind=ErrorKind.VALIDATION)

    try:
        return relay.check_status(taskId)
    except Exception as e:
        logger.exception(f"Error in /api/checkStatus: {e}")
        return _upstream_failure("Failed to check video status", e, relay)


@router.get("/test", response_model=TaskStatus, response_model_exclude_unset=True)
async def test_endpoint():
    """Fixed succeeded payload for client development. No outbound calls."""
    return dict(TEST_RESPONSE)
