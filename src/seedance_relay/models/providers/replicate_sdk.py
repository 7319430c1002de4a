from __future__ import annotations
from typing import Any, Optional
import logging
import time

import httpx
from replicate.client import Client
from replicate.exceptions import ReplicateError, ReplicateException

from .base import (
    PredictionProvider, PredictionRequest, Prediction,
    PredictionError, PredictionAuthError, PredictionUnavailable, PredictionRejected,
)

logger = logging.getLogger(__name__)

AUTH_STATUS = {401, 403}
UNAVAILABLE_STATUS = {408, 429, 500, 502, 503, 504}


def _classify(exc: BaseException) -> PredictionError:
    """Map a Replicate SDK or transport failure onto the relay error kinds."""
    if isinstance(exc, httpx.TransportError):
        return PredictionUnavailable(f"Replicate unreachable: {exc}")
    if isinstance(exc, ReplicateError):
        status = getattr(exc, "status", None)
        msg = str(exc)
        if status in AUTH_STATUS:
            return PredictionAuthError(msg)
        if status in UNAVAILABLE_STATUS:
            return PredictionUnavailable(msg)
        return PredictionRejected(msg)
    if isinstance(exc, ReplicateException):
        return PredictionRejected(str(exc))
    return PredictionError(f"Replicate provider error: {exc}")


def _timestamp(value: Any) -> Optional[str]:
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def to_prediction(raw: Any) -> Prediction:
    """Convert the SDK's prediction object into the provider-neutral record."""
    return Prediction(
        id=raw.id,
        status=raw.status,
        model=getattr(raw, "model", None),
        version=getattr(raw, "version", None),
        created_at=_timestamp(getattr(raw, "created_at", None)),
        started_at=_timestamp(getattr(raw, "started_at", None)),
        completed_at=_timestamp(getattr(raw, "completed_at", None)),
        output=getattr(raw, "output", None),
        error=getattr(raw, "error", None),
        raw=raw,
    )


class ReplicateProvider(PredictionProvider):
    def __init__(self, api_token: str, base_url: Optional[str] = None, timeout: Optional[float] = None, **kwargs):
        self.client = Client(api_token=api_token, base_url=base_url, timeout=timeout, **kwargs)
        self.base_url = base_url
        self.timeout = timeout

    def create_prediction(self, req: PredictionRequest) -> Prediction:
        t0 = time.perf_counter()
        try:
            raw = self.client.predictions.create(model=req.model, input=req.input)
        except Exception as e:
            raise _classify(e) from e

        prediction = to_prediction(raw)
        logger.info(f"Prediction created: {prediction.id}, Status: {prediction.status} ({time.perf_counter() - t0:.2f}s)")
        return prediction

    def get_prediction(self, task_id: str) -> Prediction:
        try:
            raw = self.client.predictions.get(task_id)
        except Exception as e:
            raise _classify(e) from e
        return to_prediction(raw)
