import json
from pathlib import Path

from core import Person
from infrastructure.file_repository import FilePersonRepository
from interface import app


def _seed(data_dir: Path):
    repo = FilePersonRepository(data_dir)
    repo.save(Person(240001, "Alex Yeoh", "87438807", "alexyeoh@example.com", "Blk 30 Geylang Street 29", 2024, ("friends",)))
    repo.save(Person(240002, "Bernice Yu", "99272758", "berniceyu@example.com", "Blk 30 Lorong 3", 2024, ("colleagues", "friends")))
    return repo


def _run(capsys, argv):
    rc = app.main(argv)
    return rc, capsys.readouterr().out


def test_list_outputs_all_persons(tmp_path, capsys):
    _seed(tmp_path / "data")
    rc, out = _run(capsys, ["list"])
    body = json.loads(out)
    assert rc == 0
    assert body["message"] == "Listed and Refreshed the workers recorded in the system"
    assert body["payload"]["total"] == 2
    assert [p["id"] for p in body["payload"]["persons"]] == [240001, 240002]


def test_add_then_edit_persists(tmp_path, capsys):
    repo = _seed(tmp_path / "data")
    rc, out = _run(capsys, ["add", "-n", "Charlotte Oliveiro", "-p", "93210283", "-e", "charlotte@example.com", "-a", "Blk 11", "-y", "2024", "-t", "neighbours"])
    assert rc == 0
    assert json.loads(out)["payload"]["person"]["id"] == 240003

    rc, out = _run(capsys, ["edit", "240003", "--tag", "1", "family"])
    assert rc == 0
    assert repo.load(240003).tags == ("family",)


def test_edit_clears_tags(tmp_path, capsys):
    repo = _seed(tmp_path / "data")
    rc, _ = _run(capsys, ["edit", "240002", "--tag", "-1"])
    assert rc == 0
    assert repo.load(240002).tags == ()


def test_edit_duplicate_phone_rejected(tmp_path, capsys):
    repo = _seed(tmp_path / "data")
    rc, out = _run(capsys, ["edit", "240001", "--phone", "99272758"])
    assert rc == 1
    assert json.loads(out)["payload"]["code"] == "duplicate_person"
    assert repo.load(240001).phone == "87438807"


def test_find_and_delete(tmp_path, capsys):
    repo = _seed(tmp_path / "data")
    rc, out = _run(capsys, ["find", "bernice"])
    body = json.loads(out)
    assert body["message"] == "1 persons listed!"
    assert body["payload"]["keywords"] == ["bernice"]

    rc, out = _run(capsys, ["delete", "240001"])
    assert rc == 0
    assert repo.load(240001) is None


def test_list_table_format(tmp_path, capsys):
    _seed(tmp_path / "data")
    rc, out = _run(capsys, ["list", "--format", "table"])
    assert rc == 0
    assert "Alex Yeoh" in out
    assert "colleagues, friends" in out


def test_config_roundtrip(tmp_path, capsys):
    rc, out = _run(capsys, ["config", "--set-data-dir", str(tmp_path / "elsewhere"), "--set-log-level", "INFO"])
    body = json.loads(out)
    assert rc == 0
    assert body["payload"] == {"data_dir": str(tmp_path / "elsewhere"), "log_level": "INFO"}


def test_no_command_prints_help(capsys):
    rc = app.main([])
    assert rc == 1
    assert "usage" in capsys.readouterr().out
