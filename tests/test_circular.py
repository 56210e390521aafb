import io

import pytest

from linkchain.circular import CircularLinkedList, main


@pytest.mark.parametrize(
    "items, prepended, expected",
    [([1, 2, 3], None, [1, 2, 3]), ([2, 3], 1, [1, 2, 3]), ([], 7, [7])],
)
def test_build_order(items, prepended, expected):
    chain = CircularLinkedList(items)
    if prepended is not None:
        chain.prepend(prepended)
    assert list(chain) == expected
    assert len(chain) == len(expected)


@pytest.mark.parametrize(
    "items, text",
    [([4, 5], "4 -> 5 -> (back to head)"), ([], "List is empty.")],
)
def test_str(items, text):
    assert str(CircularLinkedList(items)) == text


@pytest.mark.parametrize(
    "items, method, popped, rest",
    [
        ([1, 2, 3, 4], "pop_first", 1, [2, 3, 4]),
        ([1, 2, 3, 4], "pop_last", 4, [1, 2, 3]),
        ([9], "pop_first", 9, []),
        ([9], "pop_last", 9, []),
    ],
)
def test_pop(items, method, popped, rest):
    chain = CircularLinkedList(items)
    assert getattr(chain, method)() == popped
    assert list(chain) == rest
    assert len(chain) == len(rest)


@pytest.mark.parametrize(
    "method, appended",
    [("pop_first", [1, 2, 3, 5]), ("pop_last", [1, 2, 5]), (None, [1, 2, 3, 5])],
)
def test_append_after_pop_goes_to_end(method, appended):
    chain = CircularLinkedList([0, 1, 2, 3] if method == "pop_first" else [1, 2, 3])
    if method is not None:
        getattr(chain, method)()
    chain.append(5)
    assert list(chain) == appended


def test_reuse_after_emptying():
    chain = CircularLinkedList([9])
    chain.pop_last()
    chain.append(8)
    assert list(chain) == [8]
    assert str(chain) == "8 -> (back to head)"


@pytest.mark.parametrize("method", ["pop_first", "pop_last"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError, match="List is empty."):
        getattr(CircularLinkedList(), method)()


@pytest.mark.parametrize(
    "script, expected",
    [
        ("1 10\n2 5\n3 20\n5\n6\n0\n", "5 -> 10 -> (back to head)"),
        ("0\n", "Exiting.....Good Bye!!!!"),
        ("4\n0\n", "Deleted node from the beginning.\nList is empty."),
        ("42\n0\n", "Invalid choice! Try again."),
    ],
)
def test_main(monkeypatch, capsys, script, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main() == 0
    assert expected in capsys.readouterr().out