from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from warstats import report_server
from warstats.models.attack import WarWindow
from warstats.models.member import MemberStats
from warstats.models.result import ReportFailure, ReportSuccess

client = TestClient(report_server.app)


def _success(api_key, **kwargs):
    return ReportSuccess(
        faction_id=42,
        war_id="555",
        window=WarWindow(start=1000, end=2001),
        attack_count=3,
        members=[
            MemberStats("2", "Beta", hospitalized=2, respect=9.5),
            MemberStats("1", "Alpha", mugged=1, respect=1.0),
        ],
    )


def test_index_has_form_and_empty_table():
    resp = client.get("/")
    soup = BeautifulSoup(resp.text, "html.parser")

    assert resp.status_code == 200
    assert soup.find("input", id="api-key") is not None
    assert soup.find(id="spinner") is not None
    assert soup.find("tbody", id="report-table-body").find_all("tr") == []


def test_report_page_renders_ranked_rows(monkeypatch):
    monkeypatch.setattr(report_server, "generate_report", _success)

    resp = client.post("/report", data={"api_key": "KEY"})
    soup = BeautifulSoup(resp.text, "html.parser")
    rows = soup.find("tbody", id="report-table-body").find_all("tr")

    assert resp.status_code == 200
    assert [tr.find("td").get_text() for tr in rows] == ["Beta", "Alpha"]
    assert rows[0].find_all("td")[-1].get_text() == "9.50"


def test_report_page_alerts_on_failure(monkeypatch):
    monkeypatch.setattr(
        report_server,
        "generate_report",
        lambda api_key, **kwargs: ReportFailure("no_faction", "User does not have a faction"),
    )

    resp = client.post("/report", data={"api_key": "KEY"})

    assert 'alert("User does not have a faction")' in resp.text
    assert "<td>" not in resp.text


def test_api_report_json(monkeypatch):
    monkeypatch.setattr(report_server, "generate_report", _success)

    resp = client.post("/api/report", json={"api_key": "KEY"})
    body = resp.json()

    assert resp.status_code == 200
    assert body["war_id"] == "555"
    assert body["end"] == 2001
    assert body["columns"][0] == "Member"
    assert body["rows"][0] == ["Beta", 2, 0, 0, 2, 0, 0, 0, 0, "9.50"]


def test_api_report_status_codes(monkeypatch):
    failures = {
        "no_war": (ReportFailure("no_war", "Unable to fetch ranked war info"), 404),
        "attacks": (ReportFailure("attacks", "Unable to fetch attacks: Too many requests"), 502),
    }
    for failure, status in failures.values():
        monkeypatch.setattr(report_server, "generate_report", lambda api_key, f=failure, **kwargs: f)

        resp = client.post("/api/report", json={"api_key": "KEY"})

        assert resp.status_code == status
        assert resp.json() == {"error": failure.message, "kind": failure.kind}


def test_health():
    assert client.get("/health").json()["status"] == "ok"


def test_reports_use_settings_loaded_at_startup(monkeypatch):
    seen = []

    def fake_report(api_key, **kwargs):
        seen.append(kwargs.get("config"))
        return _success(api_key)

    monkeypatch.setattr(report_server, "generate_report", fake_report)

    client.post("/api/report", json={"api_key": "KEY"})

    assert seen == [report_server.API_CONFIG]
