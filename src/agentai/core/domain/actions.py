"""Action registry for the Agent.ai Actions API.

Why a constant table:
- Each action is a fixed `POST /action/<snake_case>` endpoint; dispatch is a
  dictionary lookup, never a chain of conditionals.
- The table is process-wide and read-only (`MappingProxyType`), so every
  client instance shares it and nothing can mutate it after import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_LLM_ENGINE = "gpt4o"

ACTION_ENDPOINTS: Mapping[str, str] = MappingProxyType(
    {
        "grabWebText": "/action/grab_web_text",
        "grabWebScreenshot": "/action/grab_web_screenshot",
        "getYoutubeTranscript": "/action/get_youtube_transcript",
        "getYoutubeChannel": "/action/get_youtube_channel",
        "getTwitterUsers": "/action/get_twitter_users",
        "getGoogleNews": "/action/get_google_news",
        "runYoutubeSearch": "/action/run_youtube_search",
        "getSearchResults": "/action/get_search_results",
        "getRecentTweets": "/action/get_recent_tweets",
        "getLinkedinProfile": "/action/get_linkedin_profile",
        "getLinkedinActivity": "/action/get_linkedin_activity",
        "getCompanyObject": "/action/get_company_object",
        "getBlueskyPosts": "/action/get_bluesky_posts",
        "searchBlueskyPosts": "/action/search_bluesky_posts",
        "getInstagramProfile": "/action/get_instagram_profile",
        "getInstagramFollowers": "/action/get_instagram_followers",
        "outputAudio": "/action/output_audio",
        "invokeLlm": "/action/invoke_llm",
        "generateImage": "/action/generate_image",
        "storeVariableToDatabase": "/action/store_variable_to_database",
        "getVariableFromDatabase": "/action/get_variable_from_database",
        "invokeAgent": "/action/invoke_agent",
        "restCall": "/action/rest_call",
        "convertFile": "/action/convert_file",
        "convertFileOptions": "/action/convert_file_options",
    }
)


def resolve_endpoint(action_id: str) -> str | None:
    """Return the endpoint path for `action_id`, or None if it is not registered.

    Matching is exact and case-sensitive: `grabwebtext` is not `grabWebText`.
    """

    if not isinstance(action_id, str):
        return None
    return ACTION_ENDPOINTS.get(action_id)


def list_actions() -> list[str]:
    return list(ACTION_ENDPOINTS)
