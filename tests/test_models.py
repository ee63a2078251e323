"""Tests for ActionResult and ClientConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from agentai.core.domain.models import ActionErrorKind, ActionResult, ClientConfig


class TestActionResult:
    def test_dump_has_exactly_four_fields(self) -> None:
        result = ActionResult.remote_error(404, "Not found")

        assert result.model_dump() == {"status": 404, "error": "Not found", "results": None, "metadata": None}
        assert result.error_kind is ActionErrorKind.REMOTE

    def test_success(self) -> None:
        result = ActionResult.success(200, results=["a"], metadata={"took": 3})

        assert result.ok
        assert result.error is None
        assert result.error_kind is None

    def test_ok_requires_2xx_status(self) -> None:
        assert ActionResult.success(204).ok
        assert not ActionResult.success(302).ok

    def test_invalid_action(self) -> None:
        result = ActionResult.invalid_action("nope")

        assert result.status == 400
        assert result.error == "Invalid action_id: nope"
        assert result.error_kind is ActionErrorKind.INVALID_ACTION
        assert not result.ok

    @pytest.mark.parametrize("message", [None, ""])
    def test_transport_error_fallback_message(self, message: str | None) -> None:
        result = ActionResult.transport_error(message)

        assert result.status == 500
        assert result.error == "Unknown error"
        assert result.error_kind is ActionErrorKind.TRANSPORT

    def test_is_frozen(self) -> None:
        result = ActionResult.success(200, results="x")

        with pytest.raises(ValidationError):
            result.status = 500  # type: ignore[misc]

    def test_json_dump_excludes_error_kind(self) -> None:
        assert "error_kind" not in ActionResult.transport_error("boom").model_dump_json()


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig()

        assert config.base_url == "https://api-lr.agent.ai/v1"
        assert config.timeout == 30.0
        assert config.headers == {}

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)

    def test_extra_keys_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(baseUrl="https://custom-url.com")  # type: ignore[call-arg]

    def test_is_frozen(self) -> None:
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.timeout = 5  # type: ignore[misc]
