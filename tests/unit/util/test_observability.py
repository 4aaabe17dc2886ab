"""Unit tests for observability settings."""

import pytest

from flashcastr.config import ObservabilitySettings, Settings
from flashcastr.util.observability import send_to_logfire


class TestSendToLogfire:
    @pytest.mark.parametrize(
        "token, explicit, expected",
        [
            (None, None, False),
            ("tok", None, True),
            ("tok", False, False),
            (None, True, True),
        ],
    )
    def test_explicit_flag_wins_over_token(self, token, explicit, expected):
        settings = Settings(
            observability=ObservabilitySettings(
                logfire_token=token, send_to_logfire=explicit
            )
        )

        assert send_to_logfire(settings) is expected
