import requests

from sim_client import client as sim_client
from sim_client.client import SimClient, save_decklist


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def json(self):
        if self.payload is None:
            raise ValueError("no json")
        return self.payload


def _opened(ids):
    return {"mode": "BOX", "total": len(ids), "stats": {"hits": 0, "srs": 0},
            "cards": [{"id": i, "rarity": "C"} for i in ids]}


def test_unreachable_server_becomes_error(monkeypatch):
    client = SimClient("http://sim.invalid")

    def boom(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(client.session, "request", boom)
    result = client.open_box()

    assert "error" in result
    assert client.last_result is None


def test_non_json_response_becomes_error(monkeypatch):
    client = SimClient("http://sim.invalid/")
    monkeypatch.setattr(client.session, "request", lambda *a, **k: FakeResponse(None, 502))

    assert "502" in client.get_card_pool()["error"]


def test_opening_replaces_last_result(monkeypatch):
    client = SimClient("http://sim.invalid")
    calls = []

    def fake_request(method, url, **kwargs):
        calls.append((method, url))
        return FakeResponse(_opened(["OP14-001"]))

    monkeypatch.setattr(client.session, "request", fake_request)
    client.open_prerelease()

    assert calls == [("POST", "http://sim.invalid/open_prerelease")]
    assert client.last_result["cards"][0]["id"] == "OP14-001"


def test_save_decklist_writes_file(monkeypatch, tmp_path, capsys):
    client = SimClient("http://sim.invalid")
    client.last_result = _opened(["OP14-001", "OP14-001_p1"])
    sent = {}

    def fake_request(method, url, **kwargs):
        sent.update(kwargs["json"])
        return FakeResponse({"decklist": "2xOP14-001", "lines": 1})

    monkeypatch.setattr(client.session, "request", fake_request)
    target = tmp_path / "decklist.txt"

    assert save_decklist(client, target) is True
    assert sent == {"card_ids": ["OP14-001", "OP14-001_p1"]}
    assert target.read_text() == "2xOP14-001\n"
    assert "Decklist saved" in capsys.readouterr().out


def test_save_decklist_needs_an_opening(tmp_path):
    client = SimClient("http://sim.invalid")
    assert save_decklist(client, tmp_path / "d.txt") is False
    assert not (tmp_path / "d.txt").exists()


def test_save_decklist_reports_server_error(monkeypatch, tmp_path, capsys):
    client = SimClient("http://sim.invalid")
    client.last_result = _opened(["ZZ-1"])
    monkeypatch.setattr(client.session, "request", lambda *a, **k: FakeResponse({"error": "Unknown card ids: ['ZZ-1']"}, 404))

    assert save_decklist(client, tmp_path / "d.txt") is False
    assert "[ERROR]" in capsys.readouterr().out


def test_main_exits(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "6")
    sim_client.main()
    assert "Goodbye!" in capsys.readouterr().out
