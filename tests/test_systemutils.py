import os

import pytest

from betterwall import systemutils


def test_process_rss_reads_resident_pages(tmp_path, monkeypatch):
    statm = tmp_path / "statm"
    statm.write_text("1000 250 30 5 0 100 0\n")
    monkeypatch.setattr(systemutils, "_STATM_PATH", statm)
    assert systemutils.process_rss() == 250 * os.sysconf("SC_PAGESIZE")


def test_process_rss_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(systemutils, "_STATM_PATH", tmp_path / "absent")
    assert systemutils.process_rss() == 0


def test_process_rss_zero_resident(tmp_path, monkeypatch):
    statm = tmp_path / "statm"
    statm.write_text("1000 0 30\n")
    monkeypatch.setattr(systemutils, "_STATM_PATH", statm)
    assert systemutils.process_rss() == 0


def test_process_rss_garbage(tmp_path, monkeypatch):
    statm = tmp_path / "statm"
    statm.write_text("garbage")
    monkeypatch.setattr(systemutils, "_STATM_PATH", statm)
    assert systemutils.process_rss() == 0


def test_format_bytes_zero():
    assert systemutils.format_bytes(0) == "0.0 B"


def test_format_bytes_fraction():
    assert systemutils.format_bytes(1536) == "1.5 KB"


def test_format_bytes_caps_at_largest_unit():
    assert systemutils.format_bytes(1024**5) == "1024.0 TB"


@pytest.mark.parametrize("size", [1, 1023, 1024, 5 * 1024**2, 7 * 1024**3 + 12345, 3 * 1024**4])
def test_format_bytes_shape(size):
    number, unit = systemutils.format_bytes(size).split(" ")
    assert unit in {"B", "KB", "MB", "GB", "TB"}
    assert 0.0 <= float(number) < 1024.0
    assert len(number.split(".")[1]) == 1


def test_format_bytes_units_increase_with_size():
    order = ["B", "KB", "MB", "GB", "TB"]
    units = [systemutils.format_bytes(1024**power).split(" ")[1] for power in range(5)]
    assert units == order
    assert all(systemutils.format_bytes(1024**power).startswith("1.0 ") for power in range(5))