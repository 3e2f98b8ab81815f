"""Login redirect and token exchange against the WAYF endpoint."""

import logging
from collections.abc import Sequence

import httpx

from wayf.client.body import BodyStream, read_body
from wayf.client.claims import build_claims
from wayf.client.query import (
    build_default_query,
    build_exchange_body,
    build_redirect_query,
    build_request_url,
)
from wayf.client.types import WayfClaims
from wayf.core.errors import TransportError
from wayf.core.settings import WayfSettings
from wayf.crypto.jwt_validator import TokenValidator
from wayf.crypto.keys import load_public_key

logger = logging.getLogger(__name__)

NEMLOGIN_SCOPING = "https://nemlogin.wayf.dk"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


class WayfClient:
    """Sends users to WAYF and turns its callbacks into :class:`WayfClaims`.

    Holds only read-only state, so a single instance can serve concurrent
    requests. The ``httpx.AsyncClient`` is owned by the caller.
    """

    def __init__(self, http: httpx.AsyncClient, settings: WayfSettings) -> None:
        self._http = http
        self._endpoint = settings.endpoint
        self._default_query = build_default_query(settings)
        self._validator = TokenValidator(load_public_key(settings.public_key))

    async def nemlogin(self) -> str:
        """Redirect URL that goes straight to NemLog-in."""
        return await self.redirect_url(NEMLOGIN_SCOPING)

    async def redirect_url(self, scoping: str | Sequence[str] = "") -> str:
        """Resolve the URL the browser should be sent to for login.

        ``scoping`` restricts the upstream identity providers WAYF offers;
        empty means no restriction. Redirects issued by WAYF are followed and
        the URL of the last request is returned unchanged.
        """
        query = build_redirect_query(self._default_query, scoping)
        url = build_request_url(self._endpoint, query)
        try:
            response = await self._http.get(url, follow_redirects=True)
        except httpx.RequestError as exc:
            raise TransportError(f"WAYF login request failed: {exc}") from exc
        logger.debug(
            "WAYF login resolved to %s (%s)", response.url, response.status_code
        )
        return str(response.url)

    async def exchange_tokens(self, request_body: BodyStream) -> httpx.Response:
        """POST the callback payload back to WAYF and return its response."""
        payload = await read_body(request_body)
        content = build_exchange_body(self._default_query, payload)
        try:
            response = await self._http.post(
                self._endpoint,
                content=content.encode(),
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
        except httpx.RequestError as exc:
            raise TransportError(f"WAYF token exchange failed: {exc}") from exc
        logger.debug("WAYF token exchange answered %s", response.status_code)
        return response

    async def validate_async(self, request_body: BodyStream) -> WayfClaims:
        """Exchange the callback body for a token and return its claims."""
        response = await self.exchange_tokens(request_body)
        principal = self._validator.validate(response)
        return build_claims(principal)
