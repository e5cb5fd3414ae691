"""Unit tests for logfire configuration decisions."""

import pytest

from udiddit.config import ObservabilitySettings
from udiddit.util.observability import should_send_to_logfire


@pytest.mark.parametrize(
    ("token", "flag", "expected"),
    [
        (None, None, False),
        ("secret", None, True),
        ("secret", False, False),
        (None, True, True),
    ],
)
def test_should_send_to_logfire(token, flag, expected):
    settings = ObservabilitySettings(logfire_token=token, send_to_logfire=flag)

    assert should_send_to_logfire(settings) is expected
