"""Profile models and resolution against the profile service.

A profile is an opaque bag of optional strings owned by the upstream profile
service.  This module fetches it over HTTP and falls back to a built-in demo
profile for the reserved ``demo`` identifier whenever the upstream lookup
fails, whatever the reason.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from bizbuz.errors import ProfileFormatError, ProfileNotFoundError

logger = logging.getLogger(__name__)

DEMO_IDENTIFIER = "demo"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class SocialLinks(BaseModel):
    """Social handles; each is rendered as a full profile URL."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    github: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


class Profile(BaseModel):
    """A profile record as served by the profile service.

    Every field is optional free-form text.  Unknown keys are kept so the
    JSON endpoint can pass the upstream record through unchanged.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: str | None = None
    title: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    social: SocialLinks | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict of the fields the upstream record carried."""
        return self.model_dump(exclude_unset=True)


def demo_profile() -> Profile:
    """Return a fresh copy of the built-in demo profile."""
    return Profile(
        name="Ada Lovelace",
        title="Software Enchantress",
        company="Planet Nine",
        email="ada@planetnine.app",
        phone="+1 (555) 123-4567",
        website="https://planetnine.app",
        location="The Cosmos",
        bio="Building the future of privacy-first technology.",
        social=SocialLinks(github="planet-nine-app", twitter="planetnine"),
    )


def unwrap_profile_payload(data: Any) -> dict[str, Any] | None:
    """Extract the profile object from a profile service response body.

    The service answers either with the profile itself or with a wrapper
    ``{"profile": {...}}``.  Returns None when the body holds no object.
    """
    if not isinstance(data, dict):
        return None
    inner = data.get("profile")
    if isinstance(inner, dict):
        return inner
    # A falsy wrapper field means the body itself is the profile
    if inner in (None, False, 0, ""):
        return data
    return None


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


def create_profile_client(
    base_url: str,
    *,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared httpx client used for profile service lookups."""
    return httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)


class ProfileResolver:
    """Resolve identifiers to profiles via ``GET {base_url}/profile/{identifier}``.

    The resolver does not own its client; whoever created the
    ``httpx.AsyncClient`` is responsible for closing it.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, identifier: str) -> dict[str, Any] | None:
        """Fetch the raw profile object, or None if the lookup failed.

        Network errors, timeouts, non-2xx statuses, undecodable bodies and
        bodies without a profile object all count as a failed lookup.
        """
        path = f"/profile/{quote(identifier, safe='')}"
        logger.debug("Fetching profile %s from %s", identifier, self._client.base_url)
        try:
            resp = await self._client.get(path)
        except httpx.HTTPError as exc:
            logger.warning("Profile service unreachable for %s: %s", identifier, exc)
            return None

        if not resp.is_success:
            logger.warning("Profile service returned %d for %s", resp.status_code, identifier)
            return None

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("Profile service sent undecodable body for %s: %s", identifier, exc)
            return None

        payload = unwrap_profile_payload(data)
        if payload is None:
            logger.warning("Profile service sent no profile object for %s", identifier)
        return payload

    async def resolve(self, identifier: str) -> Profile | None:
        """Resolve an identifier to a :class:`Profile`.

        Returns the demo profile for ``"demo"`` when the upstream lookup
        fails, and None for any other identifier.

        Raises:
            ProfileFormatError: If the upstream object is not a valid profile.
        """
        payload = await self.fetch(identifier)
        if payload is None:
            if identifier == DEMO_IDENTIFIER:
                logger.info("Serving built-in demo profile")
                return demo_profile()
            return None

        try:
            return Profile.model_validate(payload)
        except ValidationError as exc:
            raise ProfileFormatError(f"Malformed profile for {identifier}: {exc}") from exc

    async def require(self, identifier: str) -> Profile:
        """Like :meth:`resolve`, but raise :class:`ProfileNotFoundError` instead of returning None."""
        profile = await self.resolve(identifier)
        if profile is None:
            raise ProfileNotFoundError(identifier)
        return profile
