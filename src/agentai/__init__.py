"""Python client for the Agent.ai Actions API."""

from agentai.adapters.agentai_client import AgentAiClient
from agentai.core.domain.actions import ACTION_ENDPOINTS, DEFAULT_LLM_ENGINE
from agentai.core.domain.models import ActionErrorKind, ActionResult, ClientConfig

__version__ = "0.1.0"

__all__ = [
    "ACTION_ENDPOINTS",
    "DEFAULT_LLM_ENGINE",
    "ActionErrorKind",
    "ActionResult",
    "AgentAiClient",
    "ClientConfig",
    "__version__",
]
