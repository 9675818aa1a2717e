import logging
from typing import Any, Dict, List, Optional

from datasources.base import ProgressConnector
from datasources.exceptions import InvalidQuery
from datasources.helpers import fetch_json
from datasources.retry import retry

log = logging.getLogger(__name__)

HEALTH_PATH = "/user"
LEVEL_PROGRESSIONS_PATH = "/level_progressions"


class WaniKaniConnector(ProgressConnector):
    health_path = HEALTH_PATH

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        headers: Optional[Dict[str, str]] = None,
        revision: Optional[str] = None,
        retries: int = 3,
        retry_delay: float = 1.0,
        max_pages: int = 20,
    ):
        super().__init__(api_key, base_url, timeout=timeout, headers=headers)
        self.revision = revision
        self.retries = retries
        self.retry_delay = retry_delay
        self.max_pages = max_pages

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        if self.revision:
            headers["Wanikani-Revision"] = self.revision
        return headers

    async def _get(self, url: str) -> Dict[str, Any]:
        return await fetch_json(
            url,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="WaniKani request failed",
            timeout_msg="WaniKani request timed out",
            unavailable_msg="Cannot reach WaniKani at",
            auth_msg="WaniKani rejected the API key",
        )

    async def _get_with_retry(self, url: str) -> Dict[str, Any]:
        fetch = retry(attempts=self.retries, delay=self.retry_delay)(self._get)
        return await fetch(url)

    async def check_token(self) -> Dict[str, Any]:
        return await self._get_with_retry(self.health_url)

    async def level_progressions(self) -> Dict[str, Any]:
        url: Optional[str] = f"{self.base_url}{LEVEL_PROGRESSIONS_PATH}"
        data: List[Any] = []
        pages = 0

        while url:
            if pages >= self.max_pages:
                raise InvalidQuery(f"level progressions span more than {self.max_pages} pages")
            body = await self._get_with_retry(url)
            pages += 1
            items = body.get("data", [])
            if not isinstance(items, list):
                raise InvalidQuery("WaniKani response 'data' is not a list")
            data.extend(items)
            url = (body.get("pages") or {}).get("next_url")

        log.info("fetched %d level progressions in %d page(s)", len(data), pages)
        return {"object": "collection", "total_count": len(data), "data": data}
