import json
from pathlib import Path

import pytest

from mirrorstamp.exceptions import InputDecodeError
from mirrorstamp.models.repository import Repository, RepositoryStatus
from mirrorstamp.services.store import dump_repositories, load_repositories, read_repositories, write_repositories


def test_load_null_and_empty() -> None:
    assert load_repositories("null") == []
    assert load_repositories("[]") == []


def test_load_ignores_unknown_keys() -> None:
    repos = load_repositories('[{"name": "debian", "status": "success", "mirror_url": "x"}]')

    assert len(repos) == 1
    assert repos[0].status == RepositoryStatus.SUCCESS
    assert "mirror_url" not in repos[0].model_dump()


@pytest.mark.parametrize("text", ["", "{", '{"name": "debian"}', '[{"name": 5}]', '["debian"]'])
def test_load_rejects_malformed(text: str) -> None:
    with pytest.raises(InputDecodeError) as exc:
        load_repositories(text)
    assert exc.value.message_key == "store.decode_failed"
    assert exc.value.exit_code == 1


def test_dump_is_tab_indented_with_trailing_newline() -> None:
    text = dump_repositories([Repository(name="debian", size="1 KiB", size_bytes=1024)])

    assert text.endswith("]\n")
    lines = text.splitlines()
    assert lines[0] == "["
    assert lines[1] == "\t{"
    assert lines[2] == '\t\t"name": "debian",'
    assert json.loads(text)[0]["size_bytes"] == 1024


def test_dump_empty_list() -> None:
    assert dump_repositories([]) == "[]\n"


def test_dump_keeps_non_ascii() -> None:
    text = dump_repositories([Repository(name="mirror-été")])
    assert "mirror-été" in text


def test_read_and_write_files(tmp_path: Path) -> None:
    src = tmp_path / "status.json"
    src.write_text('[{"name": "debian", "upstream": "rsync://deb"}]', encoding="utf-8")
    dest = tmp_path / "out.json"

    repos = read_repositories(src)
    repos[0].status = RepositoryStatus.FAILED
    write_repositories(repos, dest)

    data = json.loads(dest.read_text(encoding="utf-8"))
    assert data == [
        {
            "name": "debian",
            "is_master": False,
            "upstream": "rsync://deb",
            "status": "failed",
            "last_update": "",
            "last_update_ts": 0,
            "last_started": "",
            "last_started_ts": 0,
            "last_ended": "",
            "last_ended_ts": 0,
            "next_schedule": "",
            "next_schedule_ts": 0,
            "size": "",
            "size_bytes": 0,
        }
    ]


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputDecodeError) as exc:
        read_repositories(tmp_path / "missing.json")
    assert exc.value.message_key == "store.io_failed"
    assert "missing.json" in str(exc.value)


def test_stdin_and_stdout(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO('[{"name": "debian"}]'))

    repos = read_repositories()
    write_repositories(repos)

    out = capsys.readouterr().out
    assert json.loads(out)[0]["name"] == "debian"
