"""OpenWeatherMap HTTP client: one GET per forecast, no retries."""

import logging
import re
from dataclasses import dataclass

import httpx

from weathercaster.config.defaults import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from weathercaster.errors import TransportError

logger = logging.getLogger(__name__)

_APPID_RE = re.compile(r"(appid=)[^&]*")


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of one API response."""

    status_code: int
    body: bytes


def redact_url(url: str) -> str:
    """Mask the API key in a request URL so it can be logged."""
    return _APPID_RE.sub(r"\1***", url)


class OwmClient:
    """Fetches raw forecast responses from OpenWeatherMap over HTTP."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> RawResponse:
        """GET a forecast URL and return its status and body untouched.

        Status codes are checked by the response parser, not here.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug("GET %s", redact_url(url))
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Weather API request failed: %s -> %s", redact_url(url), e)
            raise TransportError(f"Request failed: {e}") from e
        logger.debug("Weather API answered %d (%d bytes)", resp.status_code, len(resp.content))
        return RawResponse(status_code=resp.status_code, body=resp.content)
