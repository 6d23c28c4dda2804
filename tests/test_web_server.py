"""Tests for the HTTP API.

Test coverage:
- GET deals five distinct cards with a matching ranking name
- POST classifies tokens and reports hand/card errors as 400
- Malformed bodies are rejected before classification
- Optional API token check
"""

import pytest
from fastapi.testclient import TestClient

from poker_ranker.playground import web_server
from poker_ranker.rules import HAND_RANKING_NAMES, evaluate_hand, parse_cards

HAND_URL = "/api/v1/hand"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(web_server, "API_TOKEN", None)
    return TestClient(web_server.app)


class TestDealHand:
    def test_deal_returns_five_distinct_tokens(self, client):
        response = client.get(HAND_URL)
        assert response.status_code == 200

        body = response.json()
        assert len(body["hand"]) == 5
        assert len(set(body["hand"])) == 5
        assert body["rank"] in HAND_RANKING_NAMES.values()

    def test_deal_rank_matches_cards(self, client):
        for _ in range(20):
            body = client.get(HAND_URL).json()
            assert body["rank"] == str(evaluate_hand(parse_cards(body["hand"])))

    def test_classification_failure_is_server_error(self, client, monkeypatch):
        monkeypatch.setattr(web_server, "new_hand", lambda: parse_cards(["kh", "kh", "2s", "3s", "4s"]))
        response = client.get(HAND_URL)
        assert response.status_code == 500
        assert response.json()["detail"] == web_server.INTERNAL_ERROR_DETAIL


class TestEvaluateHand:
    @pytest.mark.parametrize(
        "cards, rank",
        [
            (["kh", "qh", "5s", "3r", "kr"], "Pair"),
            (["ah", "2s", "3k", "4r", "5r"], "Straight"),
            (["ah", "ar", "qh", "qr", "qs"], "Full house"),
            (["ts", "js", "qs", "ks", "as"], "Royal straight flush"),
            (["kr", "js", "7s", "ts", "3h"], "High card"),
        ],
    )
    def test_classifies_cards(self, client, cards, rank):
        response = client.post(HAND_URL, json={"cards": cards})
        assert response.status_code == 200
        assert response.json() == {"rank": rank}

    @pytest.mark.parametrize(
        "cards, detail",
        [
            (["kr", "js", "7s", "ts"], "Not enough cards"),
            (["kr", "js", "7s", "ts", "3h", "2h"], "Too many cards"),
            (["kr", "js", "7s", "ts", "ts"], "Duplicate cards"),
            (["kr", "js", "7s", "ts", "3d"], "Unknown suit"),
            (["kr", "js", "7s", "ts", "xh"], "Unknown card value"),
            (["kr", "js", "7s", "ts", "10h"], "Invalid card"),
        ],
    )
    def test_rejects_invalid_hands(self, client, cards, detail):
        response = client.post(HAND_URL, json={"cards": cards})
        assert response.status_code == 400
        assert response.json()["detail"] == detail

    def test_rejects_malformed_json(self, client):
        response = client.post(
            HAND_URL, content="{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    def test_rejects_wrong_shape(self, client):
        response = client.post(HAND_URL, json={"hand": ["kh"]})
        assert response.status_code == 400
        response = client.post(HAND_URL, json={"cards": "kh qh 5s 3r kr"})
        assert response.status_code == 400

    def test_bad_request_does_not_affect_next(self, client):
        assert client.post(HAND_URL, json={"cards": ["kr"]}).status_code == 400
        response = client.post(HAND_URL, json={"cards": ["ah", "7h", "qh", "th", "2h"]})
        assert response.status_code == 200
        assert response.json() == {"rank": "Flush"}


class TestRankings:
    def test_lists_rankings_weakest_first(self, client):
        body = client.get("/api/v1/rankings").json()
        assert [entry["rank"] for entry in body][0] == "High card"
        assert [entry["rank"] for entry in body][-1] == "Royal straight flush"
        assert [entry["strength"] for entry in body] == list(range(10))
        assert all(entry["description"] for entry in body)


class TestApiToken:
    def test_token_required_when_configured(self, client, monkeypatch):
        monkeypatch.setattr(web_server, "API_TOKEN", "secret")
        assert client.get(HAND_URL).status_code == 401
        response = client.get(HAND_URL, headers={"X-API-Token": "secret"})
        assert response.status_code == 200

    def test_open_when_not_configured(self, client, monkeypatch):
        monkeypatch.setattr(web_server, "API_TOKEN", None)
        assert client.get(HAND_URL).status_code == 200
