import json
from collections import Counter

import pytest

from minimr.coordinator import Coordinator
from minimr.worker import ihash
from minimr.worker_cli import main


@pytest.mark.parametrize("argv", [[], ["wc.so", "extra"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "Usage: mrworker xxx.so\n"


def test_unknown_plugin(capsys):
    assert main(["nothing.so"]) == 1
    assert "cannot load plugin nothing.so" in capsys.readouterr().err


def test_runs_assigned_map_task(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "input.txt"
    source.write_text("alpha beta alpha gamma")

    with Coordinator([str(source)], 2) as coordinator:
        coordinator.serve()
        assert main(["wc.so"]) == 0
        produced = sorted(p.name for p in tmp_path.glob("mr-0-*"))
        assert produced == ["mr-0-0", "mr-0-1"]

        keys = Counter()
        for reducer in range(2):
            for line in (tmp_path / f"mr-0-{reducer}").read_text().splitlines():
                pair = json.loads(line)
                assert ihash(pair["key"]) % 2 == reducer
                assert pair["value"] == "1"
                keys[pair["key"]] += 1
        assert keys == Counter(["alpha", "beta", "alpha", "gamma"])

        # No idle map task is left, so a second worker does nothing.
        assert main(["wc.so"]) == 0
        assert sorted(p.name for p in tmp_path.glob("mr-*")) == produced