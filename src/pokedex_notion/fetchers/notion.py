"""Notion API client (create-page and database lookup only)."""

from typing import Any, Dict, Optional
import httpx
from ..config import settings
from ..exceptions import NotionAPIError
from ..logging_config import get_logger

logger = get_logger(__name__)


class NotionClient:
    """Async client for the Notion REST API."""
    
    def __init__(
        self,
        client: httpx.AsyncClient,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        notion_version: Optional[str] = None,
    ):
        self.client = client
        self.token = token or settings.notion_key
        self.base_url = (base_url or settings.notion_base_url).rstrip("/")
        self.notion_version = notion_version or settings.notion_version
    
    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": self.notion_version,
            "Content-Type": "application/json",
        }
    
    async def _request(
        self, method: str, path: str, body: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Send a request and return the decoded JSON body."""
        logger.debug(f"{method} {self.base_url}{path}")
        response = await self.client.request(
            method,
            f"{self.base_url}{path}",
            headers=self.headers,
            json=body,
            timeout=settings.http_timeout,
        )
        if response.is_success:
            return response.json()
        
        # Notion error bodies look like {"object": "error", "code": ..., "message": ...}
        try:
            error = response.json()
        except ValueError:
            error = {"message": response.text}
        raise NotionAPIError(
            response.status_code,
            code=error.get("code"),
            message=error.get("message", ""),
        )
    
    async def create_page(self, page: Dict[str, Any]) -> Dict[str, Any]:
        """Create a page; ``page`` is the full create-page request body."""
        return await self._request("POST", "/pages", page)
    
    async def retrieve_database(self, database_id: str) -> Dict[str, Any]:
        """Retrieve database metadata; used to check token and sharing."""
        return await self._request("GET", f"/databases/{database_id}")
