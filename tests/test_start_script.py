import pytest

from scripts import start


def test_gunicorn_runs_single_threaded_worker(monkeypatch):
    calls = []
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("GUNICORN_THREADS", raising=False)
    monkeypatch.setattr(start.os, "execvp", lambda file, argv: calls.append((file, argv)))

    start.main()

    assert len(calls) == 1
    file, argv = calls[0]
    assert file == "gunicorn"
    assert argv[argv.index("--bind") + 1] == "0.0.0.0:8080"
    assert argv[argv.index("--workers") + 1] == "1"
    assert argv[argv.index("--threads") + 1] == "8"
    assert "app.wsgi:app" in argv


def test_port_from_env(monkeypatch):
    calls = []
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setattr(start.os, "execvp", lambda file, argv: calls.append(argv))
    start.main()
    assert "0.0.0.0:9000" in calls[0]


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_invalid_port_exits(monkeypatch, port):
    monkeypatch.setenv("PORT", port)
    monkeypatch.setattr(start.os, "execvp", lambda file, argv: pytest.fail("should not exec"))
    with pytest.raises(SystemExit):
        start.main()
