"""Async client for the Agent.ai Actions API.

Responsibility:
- Resolve an action identifier to its endpoint and POST the parameters.
- Normalize success, API errors and transport failures into `ActionResult`.

`action()` and `chat()` never raise for failed calls: callers inspect
`status`/`error` (or `ok`) on the returned value.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from agentai.adapters.http_client import build_async_client
from agentai.core.domain.actions import DEFAULT_LLM_ENGINE, resolve_endpoint
from agentai.core.domain.models import ActionResult, ClientConfig

logger = logging.getLogger(__name__)


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _body_field(response: httpx.Response, name: str) -> Any:
    body = _json_body(response)
    if isinstance(body, dict):
        return body.get(name)
    return None


class AgentAiClient:
    """Client for the Agent.ai action endpoints.

    One `httpx.AsyncClient` is built at construction and reused by every
    call, concurrent calls included. Close it with `aclose()` or use the
    client as an async context manager.

    Example::

        async with AgentAiClient(token) as client:
            result = await client.action("grabWebText", {"url": "https://agent.ai"})
            if result.ok:
                print(result.results)
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            config = ClientConfig()
        elif not isinstance(config, ClientConfig):
            config = ClientConfig.model_validate(dict(config))
        self.config = config
        self.base_url = config.base_url
        self._client = build_async_client(api_key, config, transport=transport)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    async def action(self, action_id: str, params: Mapping[str, Any] | None = None) -> ActionResult:
        """Execute the action registered under `action_id` with `params` as JSON body."""

        endpoint = resolve_endpoint(action_id)
        if endpoint is None:
            logger.debug("Rejected unknown action_id %r", action_id)
            return ActionResult.invalid_action(action_id)

        logger.debug("POST %s (%s)", endpoint, action_id)
        try:
            response = await self._client.post(endpoint, json=params if params is not None else {})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            message = _body_field(exc.response, "error") or str(exc)
            logger.warning("Action %s failed with HTTP %s: %s", action_id, status, message)
            return ActionResult.remote_error(status, str(message))
        except Exception as exc:
            logger.warning("Action %s failed without a response: %r", action_id, exc)
            return ActionResult.transport_error(str(exc))

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> ActionResult:
        body = _json_body(response)
        if not isinstance(body, dict):
            body = {}
        return ActionResult.success(
            response.status_code,
            results=body.get("response"),
            metadata=body.get("metadata"),
        )

    async def chat(
        self,
        prompt: str,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> ActionResult:
        """Run `invokeLlm` with `prompt` as instructions.

        `model` (default "gpt4o") becomes `llm_engine`; every other option is
        passed through to the action unchanged.
        """

        extra: dict[str, Any] = {**(options or {}), **kwargs}
        model = extra.pop("model", None)
        params = {
            "instructions": prompt,
            "llm_engine": DEFAULT_LLM_ENGINE if model is None else model,
            **extra,
        }
        return await self.action("invokeLlm", params)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AgentAiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
