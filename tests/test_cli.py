import json

import pytest

from slicer import cli

from conftest import FakeResponse, FakeSession


@pytest.fixture(autouse=True)
def offline(tmp_path, monkeypatch):
    monkeypatch.delenv("SLICER_CONFIG", raising=False)
    monkeypatch.setenv("SLICER_DIR", str(tmp_path / "cfgdir"))
    session = FakeSession({"https://x.firebaseio.com/.json": FakeResponse(200, "{}")})
    monkeypatch.setattr(cli, "make_session", lambda **kw: session)
    return session


def test_report_for_extracted_apk(apk_dir, capsys, offline):
    assert cli.main(["-d", str(apk_dir), "-nb"]) == 0
    out = capsys.readouterr().out
    assert "Backup allowed: true" in out
    assert "Permission: null" in out
    assert "- action: VIEW" in out
    assert "https://x.firebaseio.com/.json: Is open to public" in out
    assert "network_security_config.xml" in out
    assert offline.calls == ["https://x.firebaseio.com/.json"]


def test_missing_file_exits_non_zero(apk_dir, capsys):
    (apk_dir / "resources" / "res" / "values" / "strings.xml").unlink()
    assert cli.main(["-d", str(apk_dir), "-nb"]) == 1
    out = capsys.readouterr().out
    assert "No such file or directory" in out
    # the manifest section was already printed before the run stopped
    assert "Backup allowed" in out


def test_dir_is_required():
    assert cli.main(["-nb"]) == 2


def test_bad_config_exits_non_zero(tmp_path, apk_dir):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"paths": [{"path": "x", "kind": "nope"}]}))
    assert cli.main(["-d", str(apk_dir), "-c", str(bad)]) == 1


def test_init_config_writes_defaults(tmp_path):
    target = tmp_path / "new.json"
    assert cli.main(["--init-config", "-c", str(target)]) == 0
    data = json.loads(target.read_text())
    assert data["schema"] == 1
    assert data["paths"][0] == {"path": "resources/AndroidManifest.xml", "kind": "manifest"}
