"""WAYF login redirect and assertion consumer endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse

from wayf.api.deps import get_wayf_client
from wayf.client.types import WayfClaims
from wayf.client.wayf_client import WayfClient

router = APIRouter(prefix="/wayf")

HTTP_FOUND = 302


@router.get("/login")
async def login(
    client: Annotated[WayfClient, Depends(get_wayf_client)],
    idplist: Annotated[list[str] | None, Query()] = None,
) -> RedirectResponse:
    """GET /wayf/login -- send the browser to WAYF."""
    url = await client.redirect_url(idplist or "")
    return RedirectResponse(url=url, status_code=HTTP_FOUND)


@router.get("/nemlogin")
async def nemlogin(
    client: Annotated[WayfClient, Depends(get_wayf_client)],
) -> RedirectResponse:
    """GET /wayf/nemlogin -- send the browser to WAYF scoped to NemLog-in."""
    url = await client.nemlogin()
    return RedirectResponse(url=url, status_code=HTTP_FOUND)


@router.post("/acs")
async def assertion_consumer(
    request: Request,
    client: Annotated[WayfClient, Depends(get_wayf_client)],
) -> WayfClaims:
    """POST /wayf/acs -- exchange the WAYF callback for user claims."""
    return await client.validate_async(request.stream())
