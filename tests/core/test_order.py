import pytest

from listops.core import Order, Partition, compare


def test_compare_orders_numbers():
    assert compare(1, 2) is Order.LT
    assert compare(2, 1) is Order.GT
    assert compare(2, 2) is Order.EQ


def test_compare_orders_tuples_lexicographically():
    assert compare((1, "b"), (1, "c")) is Order.LT
    assert compare("abc", "ab") is Order.GT


def test_compare_propagates_incomparable_types():
    with pytest.raises(TypeError):
        compare(1, "one")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-7, Order.LT), (0, Order.EQ), (42, Order.GT)],
)
def test_order_from_int_uses_sign(value, expected):
    assert Order.from_int(value) is expected


def test_order_to_int_round_trips():
    assert [order.to_int() for order in (Order.LT, Order.EQ, Order.GT)] == [-1, 0, 1]


def test_partition_unpacks_like_a_pair():
    result = Partition(trues=(1, 3), falses=(2,))
    trues, falses = result
    assert trues == (1, 3)
    assert falses == (2,)


def test_partition_is_frozen():
    result = Partition(trues=(), falses=())
    with pytest.raises(AttributeError):
        result.trues = (1,)  # type: ignore[misc]
