import pytest

from triefind.trie import Node, Trie


@pytest.fixture
def app_trie():
    trie = Trie()
    for word in ["apple", "application", "app"]:
        trie.insert(word)
    return trie


def test_basic_operations():
    trie = Trie()
    assert trie.contains_word("apple") is False
    trie.insert("apple")
    assert trie.contains_word("apple") is True
    for prefix in ["a", "ap", "app", "appl", "apple"]:
        assert trie.contains_prefix(prefix) is True


def test_prefix_is_not_word():
    trie = Trie()
    trie.insert("apple")
    assert trie.contains_word("app") is False
    assert trie.contains_prefix("apx") is False
    assert trie.contains_word("apples") is False


def test_multiple_words(app_trie):
    for word in ["apple", "application", "app"]:
        assert app_trie.contains_word(word)
    assert app_trie.contains_prefix("app")
    results = app_trie.search("app")
    assert len(results) == 3
    assert set(results) == {"app", "apple", "application"}


def test_search_is_breadth_first(app_trie):
    assert app_trie.search("app") == ["app", "apple", "application"]


def test_search_missing_prefix(app_trie):
    assert app_trie.search("b") == []


def test_fuzzy_search(app_trie):
    assert app_trie.search_discarding_extra_letters("apfple", 1) == ["apple"]
    assert app_trie.search_discarding_extra_letters("apffple", 1) == []
    assert app_trie.search_discarding_extra_letters("xyz", 1) == []
    assert len(app_trie.search_discarding_extra_letters("app", 1)) == 3


def test_fuzzy_search_allows_more_mistakes(app_trie):
    assert app_trie.search_discarding_extra_letters("apffple", 2) == ["apple"]


def test_empty_and_edge_cases():
    trie = Trie()
    trie.insert("")
    assert trie.contains_word("")
    assert len(trie.search("")) == 1
    assert trie.contains_prefix("")
    assert len(trie.search_discarding_extra_letters("", 1)) == 1


def test_node_is_child_of(app_trie):
    a_node = app_trie.root.children["a"]
    p_node = a_node.children["p"]
    assert a_node.is_child_of(app_trie.root)
    assert p_node.is_child_of(a_node)
    assert not p_node.is_child_of(app_trie.root)


def test_words_below_uses_prefix():
    node = Node()
    node.children["x"] = Node(letter="x", is_word=True)
    assert node.words_below("pre") == ["prex"]