import pytest

from cpkit.persistent_stack import PersistentStack


def test_push_pop_peek():
    s = PersistentStack()
    s.push("a")
    s.push("b")
    assert s.peek() == "b"
    s.pop()
    assert s.peek() == "a"
    assert len(s) == 1


def test_peek_empty():
    s = PersistentStack()
    s.pop()
    with pytest.raises(IndexError):
        s.peek()


def test_versions_are_independent():
    s = PersistentStack()
    s.push("a")
    s.save(1)
    s.push("b")
    s.save(2)
    s.load(1)
    s.push("c")
    s.save(3)
    s.load(2)
    assert s.peek() == "b" and len(s) == 2
    s.load(3)
    assert s.peek() == "c"
    s.pop()
    assert s.peek() == "a"


def test_unknown_version_is_empty():
    s = PersistentStack()
    s.push("a")
    s.load(99)
    assert len(s) == 0