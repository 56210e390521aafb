import io

import pytest

from linkchain.pooled import PoolExhaustedError, StaticLinkedList, main


def _filled(*values, **options):
    chain = StaticLinkedList(**options)
    for value in values:
        chain.append(value)
    return chain


def test_prepend_and_append_order():
    chain = _filled(2)
    chain.prepend(1)
    chain.append(3)
    assert list(chain) == [1, 2, 3]
    assert len(chain) == 3


def test_insert_after():
    chain = _filled(1, 3)
    chain.insert_after(2, 1)
    chain.insert_after(4, 3)
    assert list(chain) == [1, 2, 3, 4]


def test_insert_after_missing_ref():
    chain = _filled(1)
    with pytest.raises(ValueError, match="Reference value not found."):
        chain.insert_after(5, 9)
    assert list(chain) == [1]


def test_default_capacity_is_ten():
    chain = _filled(*range(10))
    with pytest.raises(PoolExhaustedError, match="Overflow: No available node."):
        chain.append(10)
    assert len(chain) == 10


def test_freed_slots_are_reused():
    chain = _filled(1, 2, capacity=2)
    with pytest.raises(PoolExhaustedError):
        chain.prepend(0)
    assert chain.pop_first() == 1
    chain.prepend(0)
    assert list(chain) == [0, 2]


def test_missing_ref_checked_before_pool():
    chain = _filled(1, capacity=1)
    with pytest.raises(ValueError):
        chain.insert_after(2, 9)
    with pytest.raises(PoolExhaustedError):
        chain.insert_after(2, 1)


def test_pop_first_and_last():
    chain = _filled(1, 2, 3)
    assert [chain.pop_last(), chain.pop_first(), chain.pop_last()] == [3, 1, 2]
    assert list(chain) == []
    assert len(chain) == 0


@pytest.mark.parametrize("method", ["pop_first", "pop_last"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError, match="Underflow: List is empty."):
        getattr(StaticLinkedList(), method)()


def test_delete_after():
    chain = _filled(1, 2, 3)
    assert chain.delete_after(1) == 2
    assert list(chain) == [1, 3]


def test_delete_after_errors():
    with pytest.raises(IndexError):
        StaticLinkedList().delete_after(1)
    chain = _filled(1)
    with pytest.raises(ValueError, match="No element found after given reference."):
        chain.delete_after(1)
    with pytest.raises(ValueError):
        chain.delete_after(5)


def test_bad_capacity():
    with pytest.raises(ValueError):
        StaticLinkedList(0)


def test_main_runs_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5\n2 7\n3 6 5\n5\n7\n0\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Deleted value: 7" in out
    assert "List: 5 6 " in out
    assert "Exiting..." in out