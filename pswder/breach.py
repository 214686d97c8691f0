"""
Pwned Passwords breach check.

Uses the k-anonymity range API: only the first 5 characters of the
password's SHA-1 hash are sent, and the returned suffix list is matched
locally.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

PWNED_RANGE_URL = "https://api.pwnedpasswords.com/range/{prefix}"
PREFIX_LENGTH = 5

BREACHED_MESSAGE = (
    "This password has been found in a breach. "
    "Avoid reusing this password for email or sensitive accounts."
)
SAFE_MESSAGE = "This password is safe from known breaches."
UNAVAILABLE_MESSAGE = "Could not check for breaches. Please try again later."


@dataclass
class BreachCheckResult:
    """Outcome of a single breach lookup."""

    is_breached: bool
    message: str

    @classmethod
    def breached(cls) -> "BreachCheckResult":
        return cls(is_breached=True, message=BREACHED_MESSAGE)

    @classmethod
    def safe(cls) -> "BreachCheckResult":
        return cls(is_breached=False, message=SAFE_MESSAGE)

    @classmethod
    def unavailable(cls) -> "BreachCheckResult":
        return cls(is_breached=False, message=UNAVAILABLE_MESSAGE)

    def to_dict(self) -> Dict[str, Any]:
        return {"is_breached": self.is_breached, "message": self.message}


def sha1_prefix_suffix(password: str) -> Tuple[str, str]:
    """Return the (prefix, suffix) split of the uppercase SHA-1 hex digest."""
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")
    # lone surrogates hash as U+FFFD
    data = password.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode("utf-8")
    digest = hashlib.sha1(data).hexdigest().upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def suffix_in_range(body: str, suffix: str) -> bool:
    """Check a range response body ("SUFFIX:COUNT" per line) for the suffix."""
    return any(line.startswith(suffix) for line in body.split("\n"))


async def _fetch_range(client: httpx.AsyncClient, prefix: str) -> str:
    response = await client.get(PWNED_RANGE_URL.format(prefix=prefix), follow_redirects=True)
    response.raise_for_status()
    return response.text


async def check_password_breach(
    password: str,
    client: Optional[httpx.AsyncClient] = None,
) -> BreachCheckResult:
    """Check whether a password appears in the Pwned Passwords database.

    Makes exactly one request, with no retry and no timeout. Any failure
    (transport error, non-2xx status, unreadable body) yields the
    "could not check" result instead of raising.

    Args:
        password: Password to check (never sent, stored or logged)
        client: Optional caller-owned client; a fresh one is opened and
            closed per call otherwise

    Returns:
        BreachCheckResult
    """
    prefix, suffix = sha1_prefix_suffix(password)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=None) as own_client:
                body = await _fetch_range(own_client, prefix)
        else:
            body = await _fetch_range(client, prefix)
        found = suffix_in_range(body, suffix)
    except Exception as e:
        logger.warning("Breach lookup for prefix %s failed: %s", prefix, e)
        return BreachCheckResult.unavailable()

    logger.debug("Breach lookup for prefix %s: found=%s", prefix, found)
    return BreachCheckResult.breached() if found else BreachCheckResult.safe()


def check_password_breach_sync(password: str) -> BreachCheckResult:
    """Blocking wrapper around check_password_breach."""
    return asyncio.run(check_password_breach(password))
