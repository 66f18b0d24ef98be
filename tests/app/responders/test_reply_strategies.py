"""Tests for the reply strategies and build_strategy."""

import random
from unittest.mock import MagicMock

import pytest
import requests

from app.constants.canned_replies import CannedReplies
from app.constants.generate_prompt import GeneratePrompt
from app.exceptions import (
    InvalidUpstreamResponseError,
    UnsupportedResponderKindError,
    UpstreamUnavailableError,
)
from app.models.responder import Responder
from app.responders import (
    CannedReplyStrategy,
    HttpGenerateStrategy,
    build_strategy,
)

GENERATE_URL = "http://model-server:11434/api/generate"


def test_canned_strategy_uses_catalog():
    strategy = CannedReplyStrategy()
    replies = {strategy.generate("hi") for _ in range(50)}
    assert replies <= set(CannedReplies.CATALOG)


def test_canned_strategy_is_uniform_over_catalog():
    strategy = CannedReplyStrategy(catalog=("a", "b"), rng=random.Random(7))
    picks = [strategy.generate("hi") for _ in range(400)]
    assert set(picks) == {"a", "b"}
    assert 120 < picks.count("a") < 280


def test_canned_strategy_rejects_empty_catalog():
    with pytest.raises(ValueError):
        CannedReplyStrategy(catalog=())


def test_http_strategy_payload():
    session = MagicMock(spec=requests.Session)
    strategy = HttpGenerateStrategy(GENERATE_URL, session, model_name="qwen")
    payload = strategy.build_payload("what time is it?")
    assert payload == {
        "model": "qwen",
        "prompt": GeneratePrompt.render("what time is it?"),
        "stream": False,
    }
    assert GeneratePrompt.SYSTEM in payload["prompt"]
    assert payload["prompt"].index(GeneratePrompt.SYSTEM) < payload["prompt"].index(
        "what time is it?"
    )


def test_http_strategy_returns_response_text():
    session = MagicMock(spec=requests.Session)
    resp = MagicMock(status_code=200)
    resp.json.return_value = {"response": "It is noon."}
    session.post.return_value = resp
    strategy = HttpGenerateStrategy(GENERATE_URL, session, timeout=5)

    assert strategy.generate("time?") == "It is noon."
    session.post.assert_called_once()
    assert session.post.call_args.kwargs["timeout"] == 5
    assert "model" not in session.post.call_args.kwargs["json"]


def test_http_strategy_server_error():
    session = MagicMock(spec=requests.Session)
    session.post.return_value = MagicMock(status_code=500, text="boom")
    with pytest.raises(UpstreamUnavailableError, match="HTTP 500"):
        HttpGenerateStrategy(GENERATE_URL, session).generate("hi")


def test_http_strategy_timeout():
    session = MagicMock(spec=requests.Session)
    session.post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(UpstreamUnavailableError, match="timed out"):
        HttpGenerateStrategy(GENERATE_URL, session).generate("hi")


def test_http_strategy_missing_response_field():
    session = MagicMock(spec=requests.Session)
    resp = MagicMock(status_code=200)
    resp.json.return_value = {"error": "no"}
    session.post.return_value = resp
    with pytest.raises(InvalidUpstreamResponseError):
        HttpGenerateStrategy(GENERATE_URL, session).generate("hi")


def test_build_strategy_by_kind():
    session = MagicMock(spec=requests.Session)
    canned = build_strategy(Responder(name="default", kind="none"), session)
    remote = build_strategy(
        Responder(name="qwen", kind="http-generate", endpoint_url=GENERATE_URL),
        session,
        default_model="fallback-model",
    )
    assert isinstance(canned, CannedReplyStrategy)
    assert isinstance(remote, HttpGenerateStrategy)
    assert remote.build_payload("x")["model"] == "fallback-model"


@pytest.mark.parametrize(
    "responder",
    [
        Responder(name="oracle", kind="telepathy"),
        Responder(name="broken", kind="http-generate", endpoint_url=None),
    ],
)
def test_build_strategy_rejects_misconfigured(responder):
    with pytest.raises(UnsupportedResponderKindError):
        build_strategy(responder, MagicMock(spec=requests.Session))
