from dsakit.linked_list import Node, insert_at_head, traverse


def test_single_node():
    assert list(traverse(Node(20))) == [20]


def test_empty_list():
    assert list(traverse(None)) == []


def test_insert_at_head_prepends():
    head = Node(10)
    head = insert_at_head(head, 20)
    assert head.data == 20
    assert list(traverse(head)) == [20, 10]


def test_build_from_empty_reverses_insertion_order():
    head = None
    for value in [1, 2, 3]:
        head = insert_at_head(head, value)
    assert list(traverse(head)) == [3, 2, 1]


def test_insert_keeps_old_list_intact():
    old = Node(1, Node(2))
    new = insert_at_head(old, 0)
    assert new.next is old
    assert list(traverse(old)) == [1, 2]