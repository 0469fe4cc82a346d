import pytest

from replline.completer import Completer

WORDS = ["print", "prompt", "proto", "pro", "input", "int", "if"]


@pytest.fixture
def completer():
    comp = Completer()
    comp.extend(WORDS)
    return comp


def test_empty_completer_returns_nothing():
    assert Completer().complete("a") == []
    assert Completer().complete("") == []


def test_completions_reconstruct_known_words(completer):
    for prefix in ["p", "pr", "pro", "i", "in"]:
        results = completer.complete(prefix)
        assert results
        for suffix in results:
            assert prefix + suffix in WORDS


def test_completions_cover_all_longer_words(completer):
    for prefix in ["p", "pro", "in"]:
        expected = {w[len(prefix):] for w in WORDS if w.startswith(prefix) and w != prefix}
        assert set(completer.complete(prefix)) == expected


def test_completions_are_sorted(completer):
    results = completer.complete("pr")
    assert results == sorted(results)


def test_exact_word_without_extension_gives_nothing(completer):
    assert completer.complete("print") == []


def test_unknown_prefix_gives_nothing(completer):
    assert completer.complete("zz") == []


def test_worked_example():
    comp = Completer(["print", "prompt"])
    assert comp.complete("pr") == ["int", "ompt"]


def test_empty_prefix_lists_every_word(completer):
    assert sorted(completer.complete("")) == sorted(WORDS)


def test_insert_matches_extend():
    one = Completer()
    for word in WORDS:
        one.insert(word)
    other = Completer()
    other.extend(WORDS)
    assert one == other


def test_inequality_after_extra_word():
    assert Completer(["a"]) != Completer(["a", "ab"])


def test_duplicate_insert_is_idempotent():
    comp = Completer(["alpha"])
    comp.insert("alpha")
    assert comp == Completer(["alpha"])
    assert comp.complete("al") == ["pha"]