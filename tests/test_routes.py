"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from selection_count.main import app
from selection_count.services.counting.rules import RULE_IDS


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


class TestCountRoute:
    def test_basic_count(self, client):
        resp = client.post("/count", json={"text": "Hello world."})
        assert resp.status_code == 200
        body = resp.json()
        assert body["words"] == 2
        assert body["characters"] == 12
        assert body["sentences"] == 1
        assert body["character_count_mode"] == "all"
        assert body["disabled_rules"] == []
        assert "counted_at" in body

    def test_empty_text(self, client):
        body = client.post("/count", json={"text": ""}).json()
        assert (body["words"], body["characters"], body["sentences"]) == (0, 0, 0)

    def test_named_profile(self, client):
        body = client.post("/count", json={"text": "ab 12", "profile": "letters"}).json()
        assert body["characters"] == 2
        assert body["character_count_mode"] == "letters-only"

    def test_default_extension_list_applies(self, client):
        body = client.post("/count", json={"text": "see image.png"}).json()
        assert body["words"] == 1

    def test_explicit_extensions_replace_default(self, client):
        body = client.post("/count", json={"text": "see image.png", "excluded_extensions": []}).json()
        assert body["words"] == 3

    def test_inline_overrides(self, client):
        payload = {"text": "a `b` c", "counting_config": {"exclude_code": True}}
        assert client.post("/count", json=payload).json()["words"] == 2

    def test_frontmatter_overrides(self, client):
        payload = {
            "text": "a `b` c",
            "counting_config": {"exclude_code": True},
            "document": "---\ncswc-disable: exclude-inline-code\n---\na `b` c",
        }
        body = client.post("/count", json=payload).json()
        assert body["words"] == 3
        assert body["disabled_rules"] == ["exclude-inline-code"]

    def test_request_rules_and_frontmatter_combine(self, client):
        payload = {
            "text": "x",
            "disabled_rules": ["exclude-links"],
            "document": "---\ncswc-disable: [exclude-code-blocks]\n---\n",
        }
        body = client.post("/count", json=payload).json()
        assert body["disabled_rules"] == ["exclude-code-blocks", "exclude-links"]

    def test_unknown_profile(self, client):
        resp = client.post("/count", json={"text": "x", "profile": "nope"})
        assert resp.status_code == 400

    def test_invalid_override(self, client):
        payload = {"text": "x", "counting_config": {"character_count_mode": "bytes"}}
        assert client.post("/count", json=payload).status_code == 400


class TestRulesAndHealth:
    def test_rules(self, client):
        assert client.get("/count/rules").json() == {"rule_ids": list(RULE_IDS)}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_ready(self, client):
        resp = client.get("/ready")
        assert resp.status_code == 200
        assert resp.json()["profiles"] == {"ok": True, "active": "default"}
