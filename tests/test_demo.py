import json

from noemacore.demo import main


def _projection_json(output):
    _, _, tail = output.partition("Onto16 Projection:\n")
    return json.loads(tail)


def test_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Profile loaded: TestMind")
    data = _projection_json(out)
    assert set(data) == {"noema_fast", "noema_slow"}
    assert "energy_level: 1" in data["noema_fast"]


def test_run_is_deterministic(capsys):
    assert main(["hello there"]) == 0
    first = capsys.readouterr().out
    assert main(["hello there"]) == 0
    assert capsys.readouterr().out == first


def test_profile_from_file(tmp_path, capsys):
    path = tmp_path / "profile.yaml"
    path.write_text("id: FileMind\ntemperament: sanguine\n", encoding="utf-8")
    assert main(["--profile", str(path)]) == 0
    assert "Profile loaded: FileMind" in capsys.readouterr().out


def test_invalid_profile_fails(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("id: x\ntemperament: unknown_type\n", encoding="utf-8")
    assert main(["--profile", str(path)]) == 1
    assert "ParseError" in capsys.readouterr().err


def test_missing_profile_file_is_io_error(tmp_path, capsys):
    assert main(["--profile", str(tmp_path / "absent.yaml")]) == 1
    assert "IoError" in capsys.readouterr().err