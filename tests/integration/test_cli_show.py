import json

from flatconf.cli import main


def test_show_prints_flat_json(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("database:\n  host: localhost\n  port: 5432\ntags: [a, b]\n", encoding="utf-8")

    assert main(["show", str(path)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["source"] == "file:config.yaml"
    assert out["values"] == {"database.host": "localhost", "database.port": 5432, "tags": ["a", "b"]}
    assert "keys" not in out


def test_show_with_keys_and_format_override(tmp_path, capsys):
    path = tmp_path / "settings.conf"
    path.write_text('[server]\nport = 8080\n', encoding="utf-8")

    assert main(["show", str(path), "--format", "toml", "--keys"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["values"] == {"server.port": 8080}
    assert out["keys"] == {"server.port": "server.port"}


def test_show_missing_required_file_fails(tmp_path, capsys):
    assert main(["show", str(tmp_path / "missing.yaml"), "--required"]) == 1
    assert capsys.readouterr().out == ""


def test_show_missing_optional_file_is_empty(tmp_path, capsys):
    assert main(["show", str(tmp_path / "missing.json")]) == 0
    assert json.loads(capsys.readouterr().out)["values"] == {}
