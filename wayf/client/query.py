"""Query strings and form bodies sent to the WAYF endpoint.

The provider correlates the login redirect and the token exchange through
the ``acs`` and ``issuer`` parameters, so both requests encode them with
:func:`encode_pairs`.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from urllib.parse import quote_plus

from wayf.core.settings import WayfSettings

SCOPING_PARAM = "idplist"


def build_default_query(settings: WayfSettings) -> Mapping[str, str]:
    """Read-only ``acs``/``issuer`` parameters shared by every request."""
    return MappingProxyType({"acs": settings.acs, "issuer": settings.issuer})


def encode_pairs(pairs: Mapping[str, str]) -> list[str]:
    """URL-encode each pair as ``key=value``, keeping mapping order."""
    return [f"{quote_plus(key)}={quote_plus(value)}" for key, value in pairs.items()]


def build_redirect_query(
    defaults: Mapping[str, str], scoping: str | Sequence[str] = ""
) -> str:
    """Default parameters plus ``idplist``, which is sent even when empty."""
    if not isinstance(scoping, str):
        scoping = ",".join(scoping)
    query = {**defaults, SCOPING_PARAM: scoping}
    return "&".join(encode_pairs(query))


def build_request_url(endpoint: str, query: str) -> str:
    separator = "&" if "?" in endpoint else "?"
    return f"{endpoint}{separator}{query}"


def build_exchange_body(defaults: Mapping[str, str], payload: str) -> str:
    """Form body for the token exchange.

    The callback payload is already form-encoded by the provider and is
    appended verbatim as the last segment.
    """
    return "&".join([*encode_pairs(defaults), payload])
