"""Tests for HTTP error classification."""

import httpx
import pytest

from woprbot import ErrorKind, WOPRError, classify
from woprbot.core.client import parse_error_body
from woprbot.core.schemas import ErrorBody, fallback_error_body


def _body(**extra) -> ErrorBody:
    return ErrorBody.model_validate(
        {"error": {"message": "x", "type": "t", "code": "c", **extra}}
    )


@pytest.mark.parametrize(
    "status_code,kind",
    [
        (401, ErrorKind.AUTHENTICATION),
        (402, ErrorKind.INSUFFICIENT_CREDITS),
        (429, ErrorKind.RATE_LIMIT),
        (400, ErrorKind.PROVIDER),
        (403, ErrorKind.PROVIDER),
        (404, ErrorKind.PROVIDER),
        (418, ErrorKind.PROVIDER),
        (499, ErrorKind.PROVIDER),
        (500, ErrorKind.SERVER),
        (502, ErrorKind.SERVER),
        (503, ErrorKind.SERVER),
        (600, ErrorKind.SERVER),
        (302, ErrorKind.SERVER),
    ],
)
def test_classify_kind_by_status(status_code, kind):
    """Test that the kind depends only on the status code."""
    error = classify(status_code, _body())
    assert isinstance(error, WOPRError)
    assert error.kind is kind
    assert error.status_code == status_code


def test_classify_copies_common_fields():
    """Test message, type and code are carried onto the error."""
    error = classify(401, _body())
    assert error.message == "x"
    assert str(error) == "x"
    assert error.error_type == "t"
    assert error.code == "c"


def test_insufficient_credits_defaults_needs_credits():
    """Test needs_credits is True when the payload omits it."""
    error = classify(402, _body())
    assert error.needs_credits is True
    assert error.top_up_url is None
    assert error.current_balance_cents is None
    assert error.required_cents is None


def test_insufficient_credits_copies_credit_fields():
    """Test credit fields are copied through verbatim."""
    error = classify(
        402,
        _body(
            needsCredits=False,
            topUpUrl="https://wopr.bot/billing",
            currentBalanceCents=12,
            requiredCents=50,
        ),
    )
    assert error.needs_credits is False
    assert error.top_up_url == "https://wopr.bot/billing"
    assert error.current_balance_cents == 12
    assert error.required_cents == 50


@pytest.mark.parametrize("status_code", [401, 429, 418, 500])
def test_credit_fields_absent_for_other_kinds(status_code):
    """Test credit fields are ignored unless the status is 402."""
    error = classify(status_code, _body(needsCredits=True, topUpUrl="https://x.test", requiredCents=5))
    assert error.needs_credits is None
    assert error.top_up_url is None
    assert error.required_cents is None


def test_fallback_error_body():
    """Test the synthesized payload for unparsable error bodies."""
    body = fallback_error_body(503, "Service Unavailable")
    assert body.error.message == "HTTP 503: Service Unavailable"
    assert body.error.type == "server_error"
    assert body.error.code == "unknown_error"


def test_parse_error_body_valid():
    """Test a well-formed error body is parsed."""
    response = httpx.Response(
        429,
        json={"error": {"message": "Slow down", "type": "rate_limit", "code": "rate_limit_exceeded"}},
    )
    body = parse_error_body(response)
    assert body.error.message == "Slow down"
    assert body.error.code == "rate_limit_exceeded"


@pytest.mark.parametrize(
    "code,expected",
    [(None, ""), (400, "400"), ("model_not_found", "model_not_found")],
)
def test_parse_error_body_keeps_message_for_loose_code(code, expected):
    """Test null and numeric codes keep the gateway's own message."""
    response = httpx.Response(
        400,
        json={"error": {"message": "Bad model", "type": "invalid_request_error", "code": code}},
    )
    body = parse_error_body(response)
    assert body.error.message == "Bad model"
    assert body.error.type == "invalid_request_error"
    assert body.error.code == expected


def test_parse_error_body_null_type():
    """Test a null type is normalized instead of triggering the fallback."""
    response = httpx.Response(500, json={"error": {"message": "Upstream crashed", "type": None}})
    body = parse_error_body(response)
    assert body.error.message == "Upstream crashed"
    assert body.error.type == ""
    assert classify(500, body).message == "Upstream crashed"


@pytest.mark.parametrize(
    "content",
    [b"", b"<html>Bad Gateway</html>", b'{"detail": "nope"}', b"[1, 2]", b'{"error": "flat string"}'],
)
def test_parse_error_body_falls_back(content):
    """Test missing, non-JSON and wrongly shaped bodies use the fallback."""
    response = httpx.Response(502, content=content)
    body = parse_error_body(response)
    assert body.error.message == "HTTP 502: Bad Gateway"
    assert body.error.type == "server_error"
    assert body.error.code == "unknown_error"
