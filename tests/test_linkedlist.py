import pytest

from libft.linkedlist import LinkedList, Node, delete_one


def test_build_from_items_keeps_order():
    items = [1, "two", 3.0]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_returns_node_linked_in():
    lst = LinkedList(["x"])
    node = lst.push_back("y")
    assert lst.last() is node
    front = lst.push_front("w")
    assert lst.head is front
    assert front.content == "w"


def test_last_node():
    lst = LinkedList([5, 6, 7])
    end = lst.last()
    assert end.content == 7
    assert end.next is None


@pytest.mark.parametrize("items", [[], [1], list(range(10))])
def test_len_matches_items(items):
    assert len(LinkedList(items)) == len(items)


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10, lambda x: None)
    assert list(mapped) == [x * 10 for x in [1, 2, 3]]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(value):
        if value == 3:
            raise RuntimeError("stop")
        return -value

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [-1, -2]


def test_delete_one():
    deleted = []
    node = Node("payload", Node("next"))
    delete_one(node, deleted.append)
    assert deleted == ["payload"]
    assert node.next is None


def test_delete_one_without_delete_leaves_node():
    node = Node("keep")
    delete_one(node, None)
    assert node.content == "keep"


def test_repr_shows_contents():
    assert repr(LinkedList([1, 2])) == "LinkedList([1, 2])"