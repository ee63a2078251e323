"""More advanced usage patterns: custom config, chained actions, fan-out.

Set AGENT_API_KEY (or AGENTAI_API_KEY) and run:

    python examples/advanced_usage.py
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from agentai import AgentAiClient, ClientConfig
from agentai.core.config import AppSettings
from agentai.core.interfaces.actions import ActionDispatcher

logger = logging.getLogger("agentai.examples")


@dataclass
class Outcome:
    success: bool
    data: Any = None
    metadata: Any = None
    error: str | None = None
    status: int | None = None


async def perform_action(client: ActionDispatcher, action_id: str, params: dict[str, Any]) -> Outcome:
    result = await client.action(action_id, params)
    if result.ok:
        return Outcome(success=True, data=result.results, metadata=result.metadata, status=result.status)
    return Outcome(success=False, error=result.error, status=result.status)


async def get_news_and_analyze(
    client: AgentAiClient,
    topic: str,
    location: str = "US",
    days: str = "7d",
) -> dict[str, Any] | None:
    """Fetch news on `topic`, then ask the LLM to analyze the headlines."""

    logger.info('Fetching news about "%s" in %s from the last %s...', topic, location, days)
    news = await perform_action(
        client,
        "getGoogleNews",
        {"query": topic, "date_range": days, "location": location},
    )
    if not news.success:
        logger.error("Failed to get news: %s", news.error)
        return None

    articles = news.data or []
    logger.info("Found %d news articles.", len(articles))
    titles = "\n".join(str(a.get("title", "")) for a in articles if isinstance(a, dict))

    prompt = (
        f"I've collected these news headlines about {topic}:\n\n{titles}\n\n"
        "Please provide a brief analysis of the current trends and sentiment around "
        "this topic based on these headlines."
    )
    analysis = await perform_action(client, "invokeLlm", {"instructions": prompt, "llm_engine": "gpt4o"})
    if not analysis.success:
        logger.error("Failed to analyze headlines: %s", analysis.error)
        return None

    print("\n--- Analysis Results ---")
    print(analysis.data)
    print("------------------------")
    return {"articles": articles, "analysis": analysis.data}


async def batch_fetch_websites(client: AgentAiClient, urls: list[str]) -> list[dict[str, Any]]:
    """Fetch every URL concurrently over the one shared client."""

    logger.info("Fetching content from %d websites...", len(urls))
    outcomes = await asyncio.gather(*(perform_action(client, "grabWebText", {"url": url}) for url in urls))

    results = [
        {
            "url": url,
            "success": outcome.success,
            "content": outcome.data if outcome.success else None,
            "error": None if outcome.success else outcome.error,
        }
        for url, outcome in zip(urls, outcomes)
    ]
    successful = sum(1 for r in results if r["success"])
    logger.info("Successfully fetched %d of %d websites.", successful, len(urls))
    return results


async def main() -> None:
    settings = AppSettings()
    config = ClientConfig(
        base_url=settings.base_url,
        timeout=60,
        headers={"X-Custom-Header": "CustomValue"},
    )
    async with AgentAiClient(settings.api_key or "YOUR_BEARER_TOKEN_HERE", config) as client:
        await get_news_and_analyze(client, "artificial intelligence", "New York", "7d")
        print("\n" + "-" * 50 + "\n")
        await batch_fetch_websites(
            client,
            [
                "https://agent.ai",
                "https://openai.com",
                "https://anthropic.com",
                "https://huggingface.co",
            ],
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(main())
    print("\nAll examples completed!")
