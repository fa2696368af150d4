"""Meizu weather API client: one GET per call, envelope validation."""

import logging

import httpx

from weather_mcp.config.schema import MEIZU_ENDPOINT, ProviderConfig
from weather_mcp.models.errors import (
    UpstreamDataError,
    UpstreamFormatError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)

SUCCESS_CODE = "200"


class MeizuClient:
    def __init__(
        self,
        endpoint: str = MEIZU_ENDPOINT,
        timeout: float = 10.0,
        user_agent: str = "weather-mcp/1.0.0",
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, provider: ProviderConfig) -> "MeizuClient":
        return cls(
            endpoint=provider.endpoint,
            timeout=provider.timeout_seconds,
            user_agent=provider.user_agent,
        )

    async def fetch(self, provider_id: str) -> dict:
        """Fetch and validate the envelope for one city.

        No retries and no caching: every call hits the network.
        """
        params = {"cityIds": provider_id}
        headers = {"User-Agent": self.user_agent}
        logger.debug("GET %s cityIds=%s", self.endpoint, provider_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.endpoint, params=params, headers=headers)
        except httpx.RequestError as e:
            logger.error("Meizu request failed for cityIds=%s: %s", provider_id, e)
            raise UpstreamTransportError(None, str(e) or type(e).__name__) from e

        if not resp.is_success:
            logger.warning(
                "Meizu returned %d for cityIds=%s", resp.status_code, provider_id
            )
            raise UpstreamTransportError(resp.status_code, resp.reason_phrase)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Meizu body is not JSON for cityIds=%s", provider_id)
            raise UpstreamFormatError(f"天气API返回了无法解析的数据: {e}") from e

        return _validate_envelope(data)


def _validate_envelope(data: object) -> dict:
    """Require the success code and a non-empty list of data blocks."""
    if not isinstance(data, dict):
        raise UpstreamDataError("获取天气数据失败: 未知错误")
    blocks = data.get("value")
    if (
        data.get("code") != SUCCESS_CODE
        or not isinstance(blocks, list)
        or not blocks
        or not isinstance(blocks[0], dict)
    ):
        message = data.get("message") or "未知错误"
        logger.warning("Meizu envelope rejected: code=%s message=%s", data.get("code"), message)
        raise UpstreamDataError(f"获取天气数据失败: {message}")
    return data
