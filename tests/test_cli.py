from __future__ import annotations

import json

import httpx

from sunxdcc import SunXDCCClient, cli


BODY = (
    "3 results\n"
    "EFnet|5|a.mkv|1GB|Bot1|/msg Bot1 xdcc send #1\n"
    "garbage\n"
    "Rizon|1|b.mkv|2GB|Bot2|/msg Bot2 xdcc send #2\n"
)


def _patch_client(monkeypatch, handler):
    def fake_get_client(settings=None):
        return SunXDCCClient(http=httpx.Client(transport=httpx.MockTransport(handler)))

    monkeypatch.setattr(cli, "get_client", fake_get_client)


def test_search_prints_json_lines_and_reports_errors(monkeypatch, capsys):
    _patch_client(monkeypatch, lambda request: httpx.Response(200, text=BODY))
    rc = cli.main(["search", "mkv"])
    captured = capsys.readouterr()
    assert rc == 0
    rows = [json.loads(ln) for ln in captured.out.splitlines()]
    assert [r["bot"] for r in rows] == ["Bot1", "Bot2"]
    assert rows[0]["trigger"] == "/msg Bot1 xdcc send #1"
    assert "line 3" in captured.err


def test_search_max_results_and_skip_errors(monkeypatch, capsys):
    _patch_client(monkeypatch, lambda request: httpx.Response(200, text=BODY))
    rc = cli.main(["search", "mkv", "--max-results", "1", "--skip-errors"])
    captured = capsys.readouterr()
    assert rc == 0
    assert len(captured.out.splitlines()) == 1
    assert captured.err == ""


def test_search_transport_failure_exit_code(monkeypatch, capsys):
    def handler(request):
        raise httpx.ConnectError("no route", request=request)

    _patch_client(monkeypatch, handler)
    rc = cli.main(["search", "mkv"])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out == ""
    assert "failed" in captured.err


def test_search_rejects_blank_term(capsys):
    assert cli.main(["search", "  "]) == 2
