"""
Auth security helpers.

Bearer tokens are Firebase ID tokens (RS256, signed with Google's rotating
keys). For local development a shared secret can be configured instead, in
which case tokens are verified as HS256 JWTs.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any

import httpx
import jwt

from core import config

FIREBASE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"
)
JWKS_CACHE_SECONDS = 3600

logger = logging.getLogger(__name__)

_jwks: jwt.PyJWKSet | None = None
_jwks_fetched_at = 0.0


class AuthSecurityError(RuntimeError):
    pass


def jwt_secret() -> str:
    # Empty means "verify as Firebase ID token".
    return os.environ.get("JWT_SECRET", "").strip()


def jwt_algorithm() -> str:
    return config.env_str("JWT_ALG", "HS256")


def firebase_project_id() -> str:
    return os.environ.get("FIREBASE_PROJECT_ID", "").strip()


def _claims_email(payload: dict[str, Any]) -> dict[str, Any]:
    email = str(payload.get("email") or "").strip().lower()
    if not email:
        raise AuthSecurityError("Token has no email claim.")
    payload["email"] = email
    return payload


def decode_dev_token(token: str) -> dict[str, Any]:
    try:
        payload = jwt.decode(token, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc
    return _claims_email(payload)


async def _firebase_keys(*, refresh: bool = False) -> jwt.PyJWKSet:
    global _jwks, _jwks_fetched_at
    fresh = (time.monotonic() - _jwks_fetched_at) < JWKS_CACHE_SECONDS
    if _jwks is not None and fresh and not refresh:
        return _jwks

    try:
        async with httpx.AsyncClient(timeout=10.0) as client:
            resp = await client.get(FIREBASE_JWKS_URL)
    except httpx.HTTPError as exc:
        raise AuthSecurityError(f"Failed to fetch token signing keys: {exc}") from exc
    if resp.status_code != 200:
        raise AuthSecurityError(f"Failed to fetch token signing keys: {resp.status_code}")

    _jwks = jwt.PyJWKSet.from_dict(resp.json())
    _jwks_fetched_at = time.monotonic()
    logger.info("firebase_jwks_refreshed keys=%s", len(_jwks.keys))
    return _jwks


async def _signing_key(kid: str) -> jwt.PyJWK:
    keys = await _firebase_keys()
    for key in keys.keys:
        if key.key_id == kid:
            return key
    # Google rotates keys; retry once against a fresh set.
    keys = await _firebase_keys(refresh=True)
    for key in keys.keys:
        if key.key_id == kid:
            return key
    raise AuthSecurityError("Unknown token signing key.")


async def verify_firebase_token(token: str) -> dict[str, Any]:
    project_id = firebase_project_id()
    if not project_id:
        raise AuthSecurityError("FIREBASE_PROJECT_ID is not set.")

    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    key = await _signing_key(str(header.get("kid") or ""))
    try:
        payload = jwt.decode(
            token,
            key.key,
            algorithms=["RS256"],
            audience=project_id,
            issuer=f"https://securetoken.google.com/{project_id}",
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc
    return _claims_email(payload)


async def verify_token(token: str) -> dict[str, Any]:
    """
    Verify a bearer token and return its claims (with a normalized `email`).
    """
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")
    if jwt_secret():
        return decode_dev_token(raw)
    return await verify_firebase_token(raw)
