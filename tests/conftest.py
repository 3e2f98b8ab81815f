"""Shared test fixtures for the WAYF connector."""

from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel

from wayf.client.wayf_client import WayfClient
from wayf.core.settings import WayfSettings

ENDPOINT = "https://wayf.test/jwt"
ACS = "https://sp.example.org/wayf/acs"
ISSUER = "https://sp.example.org"

Handler = Callable[[httpx.Request], httpx.Response]


class RSAKeypair(BaseModel):
    """PEM-encoded RSA keypair used to sign test tokens."""

    private_key_pem: str
    public_key_pem: str


def generate_rsa_keypair() -> RSAKeypair:
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    return RSAKeypair(private_key_pem=private_pem, public_key_pem=public_pem)


@pytest.fixture(scope="session")
def keypair() -> RSAKeypair:
    """One RSA keypair for the whole session; generation is slow."""
    return generate_rsa_keypair()


@pytest.fixture(scope="session")
def other_keypair() -> RSAKeypair:
    return generate_rsa_keypair()


@pytest.fixture
def sign_token(keypair: RSAKeypair) -> Callable[[dict[str, Any]], str]:
    """Sign claims the way WAYF does (RS256)."""

    def _sign(claims: dict[str, Any]) -> str:
        return jwt.encode(claims, keypair.private_key_pem, algorithm="RS256")

    return _sign


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch, keypair: RSAKeypair) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("WAYF_ENDPOINT", ENDPOINT)
    monkeypatch.setenv("WAYF_ACS", ACS)
    monkeypatch.setenv("WAYF_ISSUER", ISSUER)
    monkeypatch.setenv("WAYF_PUBLIC_KEY", keypair.public_key_pem)


@pytest.fixture
def settings() -> WayfSettings:
    return WayfSettings()


@pytest.fixture
async def make_client(
    settings: WayfSettings,
) -> AsyncIterator[Callable[[Handler], WayfClient]]:
    """Build WayfClients whose HTTP traffic goes to a stub provider."""
    opened: list[httpx.AsyncClient] = []

    def _make(handler: Handler) -> WayfClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        opened.append(http)
        return WayfClient(http, settings)

    yield _make

    for http in opened:
        await http.aclose()
