"""HTTP client for the PetHub API, used by the notification poller."""
from typing import Any, Dict, List, Optional
import os

import httpx

PETHUB_API_URL = os.environ.get("PETHUB_API_URL", "http://localhost:8000")


class SessionExpiredError(Exception):
    """The API rejected the bearer token (HTTP 401)."""


class PetHubClient:
    """Thin async wrapper over the endpoints the notification feed reads."""

    def __init__(
        self,
        token: str,
        base_url: str = PETHUB_API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "PetHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._client.get(path, params=params)
        if response.status_code == 401:
            raise SessionExpiredError(response.text)
        response.raise_for_status()
        return response.json()

    async def get_profile(self) -> Dict[str, Any]:
        return await self._get("/user/profile")

    async def get_pets(self) -> List[Dict[str, Any]]:
        return await self._get("/pet")

    async def get_tasks(self, pet_id: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {"pet_id": pet_id} if pet_id is not None else None
        return await self._get("/task", params=params)

    async def get_posts(self) -> List[Dict[str, Any]]:
        return await self._get("/post")
