from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response

from ..errors import FetchError


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 10.0


class HttpProvider:
    """Base class that owns the HTTP session and maps transport failures."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise FetchError(f"HTTP {response.status_code}", status_code=response.status_code)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise FetchError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise FetchError("request failed") from exc
        return self._handle_response(response)


__all__ = ["HttpProvider", "RequestConfig"]
