import os
from unittest import mock

import pytest

from minimr.apps import rtiming


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_map_emits_ten_fixed_keys():
    result = rtiming.map_fn("pg.txt", "anything")
    assert [kv.key for kv in result] == list("abcdefghij")
    assert {kv.value for kv in result} == {"1"}


def test_map_ignores_input():
    assert rtiming.map_fn("a.txt", "x") == rtiming.map_fn("b.txt", "y z")


def test_reduce_alone_reports_one(workdir):
    with mock.patch("time.sleep"):
        assert rtiming.reduce_fn("a", ["1"]) == "1"
    assert list(workdir.iterdir()) == []