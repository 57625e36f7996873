"""Role-strategy plugin client over HTTP.

Endpoints live under <jenkins>/role-strategy/strategy. Assign and unassign
take multipart form fields; getAllRoles answers with a JSON object mapping
role name to the sids holding it.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jenkins_rbac.config import Settings
from jenkins_rbac.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    HttpStatusError,
    MalformedResponse,
    TransportError,
)
from jenkins_rbac.domain.value_objects import ApplyMode, EndpointVariant, RoleCategory

logger = logging.getLogger(__name__)

STRATEGY_PATH = "/role-strategy/strategy"

# Longest response excerpt kept in error messages
_DETAIL_LIMIT = 200


class RoleStrategyClient:
    """RoleGateway adapter for the Jenkins Role-based Authorization Strategy plugin.

    Calls are made one at a time over a shared httpx.AsyncClient.
    """

    def __init__(
        self,
        base_url: str,
        username: str = "",
        api_token: str = "",
        *,
        timeout: float = 30.0,
        endpoint_variant: EndpointVariant = EndpointVariant.USER,
        verify: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = _validate_base_url(base_url)
        self._variant = EndpointVariant(endpoint_variant)
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=httpx.BasicAuth(username, api_token) if username else None,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> RoleStrategyClient:
        return cls(
            settings.jenkins_url,
            settings.jenkins_username,
            settings.jenkins_api_token,
            timeout=settings.request_timeout,
            endpoint_variant=EndpointVariant(settings.endpoint_variant),
            verify=settings.verify_tls,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def assign_role(self, category: RoleCategory, role_name: str, user_id: str) -> None:
        """POST assignUserRole (or assignRole) for one role."""
        await self._change_role(ApplyMode.ASSIGN, category, role_name, user_id)

    async def unassign_role(self, category: RoleCategory, role_name: str, user_id: str) -> None:
        """POST unassignUserRole (or unassignRole) for one role."""
        await self._change_role(ApplyMode.UNASSIGN, category, role_name, user_id)

    async def get_all_roles(self, category: RoleCategory) -> dict[str, list[str]]:
        """GET getAllRoles for one category as role name -> user ids."""
        response = await self._request(
            "GET",
            f"{STRATEGY_PATH}/getAllRoles",
            params={"type": category.role_type},
        )
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(
                f"getAllRoles for {category.role_type} did not return JSON: {e}"
            ) from e
        return _parse_role_listing(payload, category)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> RoleStrategyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _change_role(
        self, mode: ApplyMode, category: RoleCategory, role_name: str, user_id: str
    ) -> None:
        endpoint = self._variant.endpoint(mode)
        # (None, value) tuples make httpx send plain multipart fields
        fields = {
            "type": (None, category.role_type),
            "roleName": (None, role_name),
            self._variant.user_field: (None, user_id),
        }
        await self._request("POST", f"{STRATEGY_PATH}/{endpoint}", files=fields)
        logger.debug("%s %s role %r for %s", endpoint, category, role_name, user_id)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s%s", method, self._base_url, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {path} timed out: {e}") from e
        except httpx.DecodingError as e:
            raise MalformedResponse(f"{method} {path} returned an undecodable body: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.status_code in (401, 403):
            raise AuthenticationError(
                response.status_code, str(response.url), _detail(response)
            )
        if not response.is_success:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise HttpStatusError(response.status_code, str(response.url), _detail(response))
        return response


def _validate_base_url(base_url: str) -> str:
    if not base_url:
        raise ConfigurationError("jenkins_url is not set")
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid jenkins_url {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"jenkins_url must be an http(s) URL, got {base_url!r}")
    return base_url.rstrip("/")


def _detail(response: httpx.Response) -> str:
    text = response.text.strip()
    if len(text) > _DETAIL_LIMIT:
        return text[:_DETAIL_LIMIT] + "..."
    return text


def _parse_role_listing(payload: Any, category: RoleCategory) -> dict[str, list[str]]:
    """Decode getAllRoles output.

    Holders are plain sid strings, or on newer plugin releases objects with
    type and sid. Group entries are dropped.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse(
            f"getAllRoles for {category.role_type} returned {type(payload).__name__}, "
            "expected an object"
        )
    listing: dict[str, list[str]] = {}
    for role_name, holders in payload.items():
        if not isinstance(holders, list):
            raise MalformedResponse(
                f"Holders of role {role_name!r} are {type(holders).__name__}, expected a list"
            )
        sids = []
        for holder in holders:
            if isinstance(holder, str):
                sids.append(holder)
            elif isinstance(holder, dict) and isinstance(holder.get("sid"), str):
                if holder.get("type", "USER") != "GROUP":
                    sids.append(holder["sid"])
            else:
                raise MalformedResponse(f"Unexpected holder of role {role_name!r}: {holder!r}")
        listing[role_name] = sids
    return listing
