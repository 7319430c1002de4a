import pytest
import httpx

from seedance_relay.client import VideoRelayClient, PollingTimeout, RelayRequestError


def make_client(handler):
    return VideoRelayClient(base_url="http://relay.test", transport=httpx.MockTransport(handler))


class TestVideoRelayClient:

    def test_create_video(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json={"taskId": "t1", "status": "started", "message": "ok"})

        with make_client(handler) as client:
            assert client.create_video("a cat", "https://example.com/c.png", "720p") == "t1"

        assert seen == {"prompt": "a cat", "imageUrl": "https://example.com/c.png", "resolution": "720p"}

    def test_error_status_raises(self):
        def handler(request):
            return httpx.Response(400, json={"error": "Missing required parameter: taskId"})

        with make_client(handler) as client:
            with pytest.raises(RelayRequestError) as exc_info:
                client.check_status("")

        assert exc_info.value.status_code == 400
        assert exc_info.value.body["error"] == "Missing required parameter: taskId"

    def test_wait_until_succeeded(self):
        statuses = iter(["starting", "processing", "succeeded"])
        calls = []

        def handler(request):
            status = next(statuses)
            calls.append(status)
            body = {"taskId": "t1", "status": status}
            if status == "succeeded":
                body["output_url"] = "https://replicate.delivery/v.mp4"
            return httpx.Response(200, json=body)

        with make_client(handler) as client:
            result = client.wait_for_completion("t1", interval=0, timeout=5)

        assert result["output_url"] == "https://replicate.delivery/v.mp4"
        assert calls == ["starting", "processing", "succeeded"]

    def test_wait_stops_on_failed(self):
        def handler(request):
            return httpx.Response(200, json={"taskId": "t1", "status": "failed", "error": "bad input"})

        with make_client(handler) as client:
            result = client.wait_for_completion("t1", interval=0, timeout=5)

        assert result["error"] == "bad input"

    def test_wait_times_out(self):
        def handler(request):
            return httpx.Response(200, json={"taskId": "t1", "status": "processing"})

        with make_client(handler) as client:
            with pytest.raises(PollingTimeout) as exc_info:
                client.wait_for_completion("t1", interval=0.01, timeout=0.05)

        assert exc_info.value.last_status["status"] == "processing"

    def test_wait_propagates_relay_errors(self):
        def handler(request):
            return httpx.Response(500, json={"error": "Failed to check video status", "details": "boom"})

        with make_client(handler) as client:
            with pytest.raises(RelayRequestError):
                client.wait_for_completion("t1", interval=0, timeout=5)
