"""
Test label extraction and normalization.
"""

import tempfile
from pathlib import Path

import pytest

from muncher.core.log_reader import extract_label, iter_labels, iter_lines, normalize_label


def test_extract_label():
    assert extract_label("2024-03-17 10:01:22 INFO vote => Иванов Иван\n") == "Иванов Иван"
    assert extract_label("vote=>Петров") == "Петров"
    assert extract_label("vote   =>   Сидоров   ") == "Сидоров"
    assert extract_label("2024-03-17 10:01:23 INFO login ok") is None
    assert extract_label("status => ok") is None


def test_extract_label_custom_pattern():
    assert extract_label("ballot: Иванов", pattern=r"ballot:\s*(.+)") == "Иванов"


def test_normalize_strips_latin():
    assert normalize_label("Иванxов") == "Иванов"
    # Latin look-alikes are removed, not transliterated
    assert normalize_label("Пeтров") == "Птров"
    assert normalize_label("ПетровPetrov") == "Петров"
    assert normalize_label("abc") == ""


def test_normalize_splits_case_transitions():
    assert normalize_label("ИвановИван") == "Иванов Иван"
    assert normalize_label("петровИван") == "петров Иван"
    # Latin is stripped before splitting
    assert normalize_label("ИвановxИван") == "Иванов Иван"
    # Only а-я/А-Я ranges count; ё is outside them
    assert normalize_label("ёЖ") == "ёЖ"
    assert normalize_label("Иванов Иван") == "Иванов Иван"


def test_iter_labels_skips_non_votes():
    lines = [
        "boot\n",
        "vote => ИвановИван\n",
        "heartbeat\n",
        "vote => Петров\n",
    ]
    assert list(iter_labels(lines)) == [
        (2, "ИвановИван", "Иванов Иван"),
        (4, "Петров", "Петров"),
    ]


def test_iter_lines():
    with tempfile.TemporaryDirectory() as tmpdir:
        log_path = Path(tmpdir) / "log.txt"
        log_path.write_text("vote => Иванов\nvote => Петров\n", encoding="utf-8")

        lines = list(iter_lines(log_path))
        assert lines == ["vote => Иванов\n", "vote => Петров\n"]

        with pytest.raises(FileNotFoundError):
            list(iter_lines(Path(tmpdir) / "missing.txt"))
