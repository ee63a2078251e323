"""Contract for anything that can run Agent.ai actions.

Why Protocol:
- Structural typing: `AgentAiClient` satisfies it without inheritance, and so
  does a hand-written fake in tests.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from agentai.core.domain.models import ActionResult


@runtime_checkable
class ActionDispatcher(Protocol):
    """Minimal contract used by the CLI.

    Design rules:
    - Both methods are async because they perform network I/O.
    - Neither raises for API or transport failures; failures come back as
      `ActionResult` values.
    """

    async def action(self, action_id: str, params: Mapping[str, Any] | None = None) -> ActionResult:
        ...

    async def chat(
        self,
        prompt: str,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> ActionResult:
        ...
