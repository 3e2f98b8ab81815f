"""FastAPI dependency injection for the shared WAYF client."""

from fastapi import Request

from wayf.client.wayf_client import WayfClient


def get_wayf_client(request: Request) -> WayfClient:
    """Return the client created by the application lifespan."""
    return request.app.state.wayf_client
