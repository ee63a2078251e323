"""Tests for the action registry."""

from __future__ import annotations

import re

import pytest

from agentai.core.domain.actions import ACTION_ENDPOINTS, DEFAULT_LLM_ENGINE, list_actions, resolve_endpoint


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def test_registry_contains_every_action() -> None:
    assert len(ACTION_ENDPOINTS) == 25
    assert list_actions()[0] == "grabWebText"
    assert list_actions()[-1] == "convertFileOptions"


@pytest.mark.parametrize("action_id", list(ACTION_ENDPOINTS))
def test_paths_are_snake_case_of_identifier(action_id: str) -> None:
    assert ACTION_ENDPOINTS[action_id] == f"/action/{_snake(action_id)}"


def test_known_entries() -> None:
    assert resolve_endpoint("grabWebText") == "/action/grab_web_text"
    assert resolve_endpoint("invokeLlm") == "/action/invoke_llm"
    assert resolve_endpoint("getGoogleNews") == "/action/get_google_news"
    assert resolve_endpoint("storeVariableToDatabase") == "/action/store_variable_to_database"


def test_lookup_is_case_sensitive() -> None:
    assert resolve_endpoint("GrabWebText") is None
    assert resolve_endpoint("grab_web_text") is None


def test_non_string_identifier_is_not_registered() -> None:
    assert resolve_endpoint(None) is None  # type: ignore[arg-type]
    assert resolve_endpoint(["grabWebText"]) is None  # type: ignore[arg-type]


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        ACTION_ENDPOINTS["newAction"] = "/action/new_action"  # type: ignore[index]


def test_default_llm_engine() -> None:
    assert DEFAULT_LLM_ENGINE == "gpt4o"
