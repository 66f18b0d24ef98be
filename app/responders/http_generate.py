"""
Remote strategy for responders of kind 'http-generate'.

Sends one POST to an Ollama-style generate endpoint and reads the `response`
field of the JSON body. A single attempt is made; there is no retry.
"""

from __future__ import annotations

from typing import Any, Optional

import requests

from app.constants.generate_prompt import GeneratePrompt
from app.exceptions import InvalidUpstreamResponseError, UpstreamUnavailableError
from app.infra.logging_config import get_logger
from app.responders.base import ReplyStrategy

logger = get_logger("http_generate")

TIMEOUT_SECONDS = 30


class HttpGenerateStrategy(ReplyStrategy):
    """Generate reply text through a remote model server."""

    def __init__(
        self,
        endpoint_url: str,
        session: requests.Session,
        model_name: Optional[str] = None,
        timeout: float = TIMEOUT_SECONDS,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._session = session
        self._model_name = model_name
        self._timeout = timeout

    def build_payload(self, content: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "prompt": GeneratePrompt.render(content),
            "stream": False,
        }
        if self._model_name:
            payload["model"] = self._model_name
        return payload

    def generate(self, content: str) -> str:
        """
        Call the endpoint and return the raw generated text.

        Raises:
            UpstreamUnavailableError: connection failure, timeout or non-2xx status.
            InvalidUpstreamResponseError: body is not JSON or has no string `response`.
        """
        try:
            resp = self._session.post(
                self._endpoint_url,
                json=self.build_payload(content),
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            logger.warning("Generate call to %s timed out: %s", self._endpoint_url, e)
            raise UpstreamUnavailableError("Responder timed out") from e
        except requests.RequestException as e:
            logger.warning("Generate call to %s failed: %s", self._endpoint_url, e)
            raise UpstreamUnavailableError("Responder is unavailable") from e

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "Generate call to %s returned HTTP %s: %s",
                self._endpoint_url,
                resp.status_code,
                resp.text[:500] if resp.text else "no body",
            )
            raise UpstreamUnavailableError(
                f"Responder returned HTTP {resp.status_code}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise InvalidUpstreamResponseError(
                "Responder returned invalid JSON"
            ) from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise InvalidUpstreamResponseError("Responder returned no text")
        return text
