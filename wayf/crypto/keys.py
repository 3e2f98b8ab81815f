"""Parsing of the WAYF RSA public signing key."""

import base64

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from cryptography.hazmat.primitives.asymmetric.types import PublicKeyTypes

from wayf.core.errors import KeyFormatError

PEM_MARKER = "-----BEGIN"


def _normalize(credential: str) -> str:
    """Undo the escaped newlines of single-line environment values."""
    return credential.replace("\\n", "\n").strip()


def _load_pem(credential: str) -> PublicKeyTypes:
    return serialization.load_pem_public_key(credential.encode())


def _load_base64_der(credential: str) -> PublicKeyTypes:
    """Load a bare base64 SubjectPublicKeyInfo body (no PEM armour)."""
    compact = "".join(credential.split())
    der = base64.b64decode(compact, validate=True)
    return serialization.load_der_public_key(der)


def load_public_key(credential: str) -> RSAPublicKey:
    """Parse PEM or bare base64 DER key material into an RSA public key."""
    text = _normalize(credential)
    if not text:
        raise KeyFormatError("Public key is empty")
    try:
        if text.startswith(PEM_MARKER):
            loaded = _load_pem(text)
        else:
            loaded = _load_base64_der(text)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyFormatError(f"Public key could not be parsed: {exc}") from exc
    if not isinstance(loaded, RSAPublicKey):
        raise KeyFormatError(
            f"Unsupported key type {type(loaded).__name__}, expected RSA"
        )
    return loaded
