"""
API models for the video generation relay endpoints.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional


class CreateVideoResponse(BaseModel):
    """Response after a generation task was started."""
    taskId: str = Field(..., description="Task identifier assigned by the remote service")
    status: str = Field("started", description="Always 'started'")
    message: str = Field("Video generation task created successfully")

    model_config = {
        "json_schema_extra": {
            "example": {
                "taskId": "ufawqhfynnddngldkgtslldrkq",
                "status": "started",
                "message": "Video generation task created successfully"
            }
        }
    }

class TaskStatus(BaseModel):
    """
    Snapshot of a remote task.

    ``output_url`` is only present for succeeded tasks and ``error`` only for
    failed ones; responses are serialized with unset fields excluded.
    """
    taskId: str = Field(..., description="Task identifier")
    status: str = Field(..., description="starting, processing, succeeded or failed")
    created_at: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    model: Optional[str] = None
    version: Optional[str] = None
    output_url: Optional[Any] = Field(None, description="Generated video URL")
    error: Optional[Any] = Field(None, description="Remote failure reason")
    message: Optional[str] = None

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "example": {
                "taskId": "ufawqhfynnddngldkgtslldrkq",
                "status": "succeeded",
                "created_at": "2025-06-01T12:00:00.000Z",
                "started_at": "2025-06-01T12:00:02.000Z",
                "completed_at": "2025-06-01T12:01:10.000Z",
                "model": "bytedance/seedance-1-lite",
                "output_url": "https://replicate.delivery/example/output.mp4"
            }
        }
    }
