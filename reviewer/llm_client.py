import logging
from typing import Any, Dict, List, Optional

import requests

from shared.errors import UpstreamError

log = logging.getLogger(__name__)


class MistralClient:
    """Minimal client for the Mistral chat completions endpoint."""

    def __init__(self, api_key: str, endpoint: str, timeout: Optional[float] = None):
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout

    def complete(self, model: str, messages: List[Dict[str, str]], temperature: float) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        body = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "stream": False,
        }
        try:
            resp = requests.post(self.endpoint, headers=headers, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("Mistral request error: %r", e)
            raise UpstreamError(f"Could not reach the review service: {e.__class__.__name__}") from e

        if not 200 <= resp.status_code < 300:
            try:
                msg = resp.text[:400]
            except Exception:
                msg = ""
            log.warning("Mistral HTTP %s: %s", resp.status_code, msg)
            raise UpstreamError(f"Review service returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            log.warning("Mistral response: non-JSON body")
            raise UpstreamError("Review service returned an unreadable response") from e

        if not isinstance(data, dict):
            log.warning("Mistral response: unexpected body type %s", type(data).__name__)
            raise UpstreamError("Review service returned an unreadable response")
        return data
