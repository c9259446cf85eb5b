import re

import pytest
import regex

from matchvalues.match import Capture, Group, MatchResult


def test_none_is_a_failed_match():
    view = MatchResult.of(None)

    assert view.succeeded is False
    assert view.group_count == 1
    assert view.group(0).succeeded is False
    assert view.group(0).text == ""


def test_of_returns_existing_view():
    view = MatchResult.of(re.search("a", "a"))

    assert MatchResult.of(view) is view


def test_of_rejects_non_match_objects():
    with pytest.raises(TypeError):
        MatchResult.of("a")


def test_group_count_includes_whole_match():
    view = MatchResult.of(re.search(r"(a)(?:b)(c)?", "ab"))

    assert view.group_count == 3
    assert [group.succeeded for group in view.groups()] == [True, True, False]


def test_groups_by_name_and_digit_name():
    view = MatchResult.of(re.search(r"(?P<word>[a-z]+) (\d+)", "abc 42"))

    assert view.group("word").text == "abc"
    assert view.group("word").index == 1
    assert view.group(1).name == "word"
    assert view.group("2").text == "42"


@pytest.mark.parametrize("key", ["missing", "9", 9, -1])
def test_unknown_group_is_failed_not_an_error(key):
    view = MatchResult.of(re.search(r"(?P<word>[a-z]+)", "abc"))

    group = view.group(key)

    assert group.succeeded is False
    assert group.captures == ()
    assert group.capture is None
    assert group.text == ""
    assert group.start == group.end == -1


def test_stdlib_engine_records_last_repetition_only():
    view = MatchResult.of(re.search(r"(?:(\d)\s*)+", "a 1 2 3"))

    group = view.group(1)

    assert group.captures == (Capture("3", 6, 7),)


def test_regex_engine_records_every_repetition():
    view = MatchResult.of(regex.search(r"(?:(\d)\s*)+", "a 1 2 3"))

    group = view.group(1)

    assert [capture.text for capture in group.captures] == ["1", "2", "3"]
    assert [(c.start, c.end) for c in group.captures] == [(2, 3), (4, 5), (6, 7)]
    assert group.text == "3"
    assert (group.start, group.end) == (6, 7)


def test_empty_capture_succeeds():
    for engine in (re, regex):
        group = MatchResult.of(engine.search(r"x(\d*)x", "xx")).group(1)

        assert group.succeeded is True
        assert group.text == ""


def test_group_is_frozen():
    group = Group(index=0, name=None, succeeded=False)

    with pytest.raises(AttributeError):
        group.succeeded = True
