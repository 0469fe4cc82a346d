import pytest

from replline.history import History


@pytest.fixture
def history():
    hist = History()
    for line in ["first", "second", "third"]:
        hist.append(line)
    return hist


def test_empty_history():
    hist = History()
    assert hist.previous() is None
    assert hist.next() is None
    assert hist.current() is None


def test_previous_walks_backwards(history):
    assert history.previous() == "third"
    assert history.previous() == "second"
    assert history.previous() == "first"
    assert history.previous() is None
    assert history.current() == "first"


def test_next_walks_forwards(history):
    for _ in range(3):
        history.previous()
    assert history.next() == "second"
    assert history.next() == "third"
    assert history.next() is None
    assert history.current() is None


def test_current_follows_cursor(history):
    assert history.current() is None
    history.previous()
    history.previous()
    assert history.current() == "second"


def test_reset_index(history):
    history.previous()
    history.reset_index()
    assert history.current() is None
    assert history.previous() == "third"


def test_append_resets_cursor(history):
    history.previous()
    history.previous()
    history.append("fourth")
    assert history.current() is None
    assert history.previous() == "fourth"
    assert len(history) == 4


def test_next_at_start_stays_at_start(history):
    assert history.next() is None
    assert history.previous() == "third"