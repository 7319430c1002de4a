from __future__ import annotations
from typing import Any, Dict, Optional
import logging

import httpx
from tenacity import Retrying, RetryError, retry_if_result, stop_after_delay, wait_fixed

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = {"succeeded", "failed", "canceled"}


class RelayRequestError(RuntimeError):
    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Relay returned HTTP {status_code}: {body}")

class PollingTimeout(TimeoutError):
    def __init__(self, task_id: str, last_status: Optional[Dict[str, Any]]):
        self.task_id = task_id
        self.last_status = last_status
        super().__init__(f"Task {task_id} did not finish in time (last status: {(last_status or {}).get('status')})")


def _is_pending(status: Dict[str, Any]) -> bool:
    return status.get("status") not in TERMINAL_STATUSES


class VideoRelayClient:
    """
    Caller-side client for the relay. The relay never polls on its own;
    ``wait_for_completion`` re-checks a task at a fixed interval until the
    remote service reports a terminal status.
    """

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30.0,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url
        self.client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        response = self.client.get(path, params=params)
        try:
            body = response.json()
        except ValueError:
            body = response.text
        if response.status_code != 200:
            raise RelayRequestError(response.status_code, body)
        return body

    def create_video(self, prompt: str, image_url: str, resolution: Optional[str] = None) -> str:
        params = {"prompt": prompt, "imageUrl": image_url}
        if resolution:
            params["resolution"] = resolution
        body = self._get("/api/createVideo", params)
        logger.info(f"Task started: {body['taskId']}")
        return body["taskId"]

    def check_status(self, task_id: str) -> Dict[str, Any]:
        return self._get("/api/checkStatus", {"taskId": task_id})

    def wait_for_completion(self, task_id: str, interval: float = 5.0, timeout: float = 600.0) -> Dict[str, Any]:
        last: Dict[str, Any] = {}

        def poll() -> Dict[str, Any]:
            nonlocal last
            last = self.check_status(task_id)
            logger.info(f"Task {task_id}: {last.get('status')}")
            return last

        retrying = Retrying(
            retry=retry_if_result(_is_pending),
            wait=wait_fixed(interval),
            stop=stop_after_delay(timeout),
        )
        try:
            return retrying(poll)
        except RetryError as e:
            raise PollingTimeout(task_id, last) from e

    def close(self):
        self.client.close()

    def __enter__(self) -> "VideoRelayClient":
        return self

    def __exit__(self, *exc_info):
        self.close()
