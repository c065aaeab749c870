from __future__ import annotations

from build_stats.registry import Entry
from build_stats.reporting.formatting import Colors, format_entry, format_kb, resolve_color


def test_format_kb_uses_legacy_divisor_and_rounds_half_up() -> None:
    assert format_kb(1204) == 1
    assert format_kb(2408) == 2
    assert format_kb(602) == 1
    assert format_kb(601) == 0


def test_pretty_single_and_multi() -> None:
    assert format_entry(Entry("A", 1, 1204), pretty=True) == "Stats for 'A': 1KB"
    assert format_entry(Entry("B", 150, 2408), pretty=True) == "Stats for 'B': 150 files, 2KB"


def test_zero_count_uses_plural_phrasing() -> None:
    assert format_entry(Entry("Z"), pretty=True) == "Stats for 'Z': 0 files, 0KB"
    assert format_entry(Entry("Z")) == "Z: 0 files with 0 bytes"


def test_colored_count_flags_many_files() -> None:
    many = format_entry(Entry("B", 150, 2408), pretty=True, color=True)
    few = format_entry(Entry("C", 99, 0), pretty=True, color=True)
    assert f"{Colors.RED}150{Colors.END} files" in many
    assert f"{Colors.GREEN}99{Colors.END} files" in few
    assert f"'{Colors.GREY}B{Colors.END}'" in many


def test_colored_single_has_no_count() -> None:
    line = format_entry(Entry("A", 1, 1204), pretty=True, color=True)
    assert line == f"Stats for '{Colors.GREY}A{Colors.END}': 1KB"


class _Stream:
    def __init__(self, tty: bool) -> None:
        self.tty = tty

    def isatty(self) -> bool:
        return self.tty


def test_resolve_color_auto_follows_terminal() -> None:
    assert resolve_color("auto", _Stream(True)) is True
    assert resolve_color("auto", _Stream(False)) is False
    assert resolve_color(None, _Stream(True)) is True
    assert resolve_color("auto", None) is False


def test_resolve_color_explicit_settings_win() -> None:
    assert resolve_color(True, _Stream(False)) is True
    assert resolve_color(False, _Stream(True)) is False
    assert resolve_color("always", _Stream(False)) is True
    assert resolve_color("never", _Stream(True)) is False
