import pytest

from inquest.errors import CustomUserError
from inquest.path_completer import FilePathCompleter


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "apple1.txt").write_text("a")
    (tmp_path / "apple2.txt").write_text("b")
    (tmp_path / "banana").mkdir()
    return tmp_path


def test_fresh_completer_has_nothing_for_empty_input():
    assert FilePathCompleter().get_suggestions("") == []


def test_directory_input_lists_entries_with_dirs_slashed(tree):
    base = f"{tree}/"
    suggestions = FilePathCompleter().get_suggestions(base)
    assert sorted(suggestions) == sorted(
        [f"{base}apple1.txt", f"{base}apple2.txt", f"{base}banana/"]
    )


def test_prefix_filters_entries(tree):
    suggestions = FilePathCompleter().get_suggestions(f"{tree}/app")
    assert sorted(suggestions) == [f"{tree}/apple1.txt", f"{tree}/apple2.txt"]
    assert all(s.startswith(f"{tree}/app") for s in suggestions)


def test_exact_match_is_not_suggested(tree):
    path = f"{tree}/apple1.txt"
    assert FilePathCompleter().get_suggestions(path) == []


def test_completion_without_highlight_uses_common_prefix(tree):
    completer = FilePathCompleter()
    assert completer.get_completion(f"{tree}/a", None) == f"{tree}/apple"


def test_longest_common_prefix_is_prefix_of_every_suggestion(tree):
    completer = FilePathCompleter()
    suggestions = completer.get_suggestions(f"{tree}/")
    lcp = completer.longest_common_prefix()
    assert all(s.startswith(lcp) for s in suggestions)
    assert lcp.startswith(f"{tree}/")


def test_completion_returns_highlighted_suggestion(tree):
    completer = FilePathCompleter()
    chosen = f"{tree}/apple2.txt"
    assert completer.get_completion(f"{tree}/a", chosen) == chosen


def test_single_match_completes_to_it(tree):
    completer = FilePathCompleter()
    assert completer.get_completion(f"{tree}/b", None) == f"{tree}/banana/"


def test_no_match_gives_no_completion(tree):
    completer = FilePathCompleter()
    assert completer.get_completion(f"{tree}/zzz", None) is None


def test_suggestions_are_limited(tmp_path):
    for i in range(20):
        (tmp_path / f"file{i}").write_text("x")
    suggestions = FilePathCompleter().get_suggestions(f"{tmp_path}/")
    assert len(suggestions) == 15
    assert len(set(suggestions)) == len(suggestions)


def test_missing_directory_falls_back_to_parent(tree):
    assert FilePathCompleter().get_suggestions(f"{tree}/missing/") == []


def test_missing_parent_raises_user_error(tree):
    with pytest.raises(CustomUserError):
        FilePathCompleter().get_suggestions(f"{tree}/nope/x")


def test_file_used_as_directory_raises_user_error(tree):
    with pytest.raises(CustomUserError):
        FilePathCompleter().get_suggestions(f"{tree}/apple1.txt/")


def test_repeated_input_reuses_results(tree):
    completer = FilePathCompleter()
    first = completer.get_suggestions(f"{tree}/a")
    (tree / "apricot").write_text("c")
    assert completer.get_suggestions(f"{tree}/a") == first