from .poller import VideoRelayClient, PollingTimeout, RelayRequestError, TERMINAL_STATUSES

__all__ = ["VideoRelayClient", "PollingTimeout", "RelayRequestError", "TERMINAL_STATUSES"]
