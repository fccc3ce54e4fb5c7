import pytest

from puzzlepaths.trie import SearchResult, Trie


@pytest.fixture
def trie():
    return Trie(["cat", "cats", "Dog", "do"])


def test_search_found(trie):
    assert trie.search("cat") is SearchResult.FOUND
    assert trie.search("cats") is SearchResult.FOUND


def test_search_partial(trie):
    assert trie.search("ca") is SearchResult.PARTIAL
    assert trie.search("d") is SearchResult.PARTIAL


def test_search_not_found(trie):
    assert trie.search("cow") is SearchResult.NOT_FOUND
    assert trie.search("catsup") is SearchResult.NOT_FOUND


def test_search_is_case_insensitive(trie):
    assert trie.search("DOG") is SearchResult.FOUND
    assert trie.search("CaTs") is SearchResult.FOUND


def test_empty_search_is_partial(trie):
    assert trie.search("") is SearchResult.PARTIAL


def test_search_results_carry_status_strings(trie):
    assert trie.search("cat").value == "FOUND"
    assert trie.search("cow").value == "NOT FOUND"
    assert trie.search("ca").value == "PARTIAL"


def test_iteration_is_alphabetical(trie):
    assert list(trie) == ["cat", "cats", "do", "dog"]


def test_insert_rejects_non_letters():
    with pytest.raises(ValueError):
        Trie(["don't"])


def test_search_rejects_non_letters_on_known_prefix(trie):
    with pytest.raises(ValueError):
        trie.search("ca1")


def test_search_stops_before_unknown_prefix(trie):
    assert trie.search("x1") is SearchResult.NOT_FOUND


def test_empty_word_is_ignored():
    t = Trie(["", "a"])
    assert list(t) == ["a"]
    assert t.search("") is SearchResult.PARTIAL


def test_duplicate_insert_keeps_single_entry():
    t = Trie(["bee", "bee"])
    assert list(t) == ["bee"]


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nBanana  cherry\n\n", encoding="utf-8")
    t = Trie.from_file(path)
    assert list(t) == ["apple", "banana", "cherry"]
    assert t.search("ban") is SearchResult.PARTIAL


def test_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        Trie.from_file(tmp_path / "missing.txt")