"""
Access to the process-wide relay service built at startup.
"""

from seedance_relay.models.relay import RelayService

# Global application state, populated by the lifespan handler
app_state = {}


def get_relay_service() -> RelayService:
    """FastAPI dependency to get the relay service from app state."""
    return app_state["relay_service"]
