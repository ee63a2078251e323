"""Basic usage of AgentAiClient.

Set AGENT_API_KEY (or AGENTAI_API_KEY) and run:

    python examples/basic_usage.py
"""

from __future__ import annotations

import asyncio

from agentai import AgentAiClient
from agentai.core.config import AppSettings


async def main() -> None:
    settings = AppSettings()
    async with AgentAiClient(settings.api_key or "YOUR_BEARER_TOKEN_HERE") as client:
        page = await client.action("grabWebText", {"url": "https://agent.ai"})
        if page.ok:
            print(str(page.results)[:500])
        else:
            print(f"grabWebText failed ({page.status}): {page.error}")

        answer = await client.chat("What is an AI agent? Answer in two sentences.")
        print(answer.results if answer.ok else answer.error)

        answer = await client.chat("Same question, shorter.", model="claude3opus", max_tokens=100)
        print(answer.results if answer.ok else answer.error)


if __name__ == "__main__":
    asyncio.run(main())
