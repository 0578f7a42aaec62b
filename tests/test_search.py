import pytest

from simplecloud.elements import ElementCore
from simplecloud.search import (
    NavigationHistory,
    extract_filename,
    search_elements,
    search_path,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _cores(*names):
    return [ElementCore(name, name, None) for name in names]


def test_extract_filename_takes_last_component():
    assert extract_filename("home/docs/report.pdf") == "report.pdf"


def test_extract_filename_skips_trailing_slashes():
    assert extract_filename("home/docs/") == "docs"


@pytest.mark.parametrize("path", ["", "/", "///"])
def test_extract_filename_unknown_when_empty(path):
    assert extract_filename(path) == "Unknown"


def test_search_is_case_insensitive_and_keeps_order():
    elements = _cores("Report.PDF", "notes.txt", "old_report.doc")
    result = search_elements(elements, "REPORT")
    assert [e.name for e in result] == ["Report.PDF", "old_report.doc"]


def test_search_empty_query_matches_nothing():
    assert search_elements(_cores("a", "b"), "") == []


def test_search_results_are_subset_containing_query():
    elements = _cores("alpha", "beta", "gamma", "delta")
    result = search_elements(elements, "ta")
    assert all("ta" in e.name.lower() for e in result)
    assert all(e in elements for e in result)
    assert len(result) == 2


def test_search_no_match_is_empty():
    assert search_elements(_cores("alpha"), "zzz") == []


def test_search_path_keeps_parent_and_name():
    assert search_path("home/docs/report.pdf") == ":/docs/report.pdf"


def test_search_path_single_component():
    assert search_path("report.pdf") == ":/report.pdf"


def test_history_starts_empty():
    history = NavigationHistory()
    assert history.current is None
    assert len(history) == 0
    assert history.back() is None
    assert history.forward() is None


def test_history_back_and_forward():
    history = NavigationHistory()
    for path in (":/", ":/a", ":/a/b"):
        history.push(path)
    assert history.current == ":/a/b"
    assert history.back() == ":/a"
    assert history.back() == ":/"
    assert history.back() is None
    assert history.forward() == ":/a"
    assert history.forward() == ":/a/b"
    assert history.forward() is None
    assert history.index == 2


def test_push_drops_forward_entries():
    history = NavigationHistory()
    for path in (":/", ":/a", ":/a/b"):
        history.push(path)
    history.back()
    history.back()
    history.push(":/c")
    assert history.paths == [":/", ":/c"]
    assert history.current == ":/c"
    assert not history.can_go_forward


def test_reset_returns_last_current_path():
    history = NavigationHistory()
    history.push(":/")
    history.push(":/a")
    assert history.reset() == ":/a"
    assert history.current is None
    assert len(history) == 0


def test_cooldown_blocks_rapid_moves():
    clock = FakeClock()
    history = NavigationHistory(cooldown=0.27, clock=clock)
    for path in (":/", ":/a", ":/a/b"):
        history.push(path)
    assert history.back() == ":/a"
    assert history.back() is None
    assert history.current == ":/a"
    clock.now = 0.3
    assert history.back() == ":/"


def test_negative_cooldown_rejected():
    with pytest.raises(ValueError):
        NavigationHistory(cooldown=-1)