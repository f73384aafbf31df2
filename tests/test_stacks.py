import pytest

from pushswap.parsing import InputError
from pushswap.stacks import Operation, Stacks, is_sorted, parse_operation


def make(a, b=()):
    stacks = Stacks(a)
    stacks.b.extend(b)
    return stacks


def test_is_sorted_cases():
    assert is_sorted([]) is True
    assert is_sorted([5]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([1, 3, 2]) is False


def test_parse_operation_with_and_without_newline():
    assert parse_operation("pa\n") is Operation.PA
    assert parse_operation("rrr") is Operation.RRR


@pytest.mark.parametrize("text", ["", "p", "xx\n", "rrrr", "sa \n", "SA"])
def test_parse_operation_rejects_unknown(text):
    with pytest.raises(InputError):
        parse_operation(text)


def test_every_operation_name_round_trips():
    for op in Operation:
        assert parse_operation(str(op) + "\n") is op


def test_swap_a():
    s = make([3, 1, 2])
    s.apply(Operation.SA)
    assert list(s.a) == [1, 3, 2]


def test_swap_short_stack_is_noop():
    s = make([7])
    s.apply("sa")
    s.apply("sb")
    assert list(s.a) == [7]
    assert list(s.b) == []


def test_ss_swaps_both():
    s = make([1, 2], [3, 4])
    s.apply("ss")
    assert list(s.a) == [2, 1]
    assert list(s.b) == [4, 3]


def test_push_moves_top():
    s = make([1, 2, 3])
    s.apply("pb")
    s.apply("pb")
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.apply("pa")
    assert list(s.a) == [2, 3]
    assert list(s.b) == [1]


def test_push_from_empty_is_noop():
    s = make([1, 2])
    s.apply("pa")
    assert list(s.a) == [1, 2]
    assert list(s.b) == []


def test_rotate_and_reverse_rotate():
    s = make([1, 2, 3])
    s.apply("ra")
    assert list(s.a) == [2, 3, 1]
    s.apply("rra")
    assert list(s.a) == [1, 2, 3]
    s.apply("rra")
    assert list(s.a) == [3, 1, 2]


def test_rr_and_rrr_act_on_both():
    s = make([1, 2, 3], [4, 5])
    s.apply("rr")
    assert list(s.a) == [2, 3, 1]
    assert list(s.b) == [5, 4]
    s.apply("rrr")
    assert list(s.a) == [1, 2, 3]
    assert list(s.b) == [4, 5]


def test_operations_preserve_contents():
    s = make([5, 9, 1, 4, 2])
    ops = ["pb", "pb", "ss", "rr", "rrr", "ra", "rb", "rrb", "pa", "sa", "pa"]
    s.apply_all(ops)
    assert sorted(list(s.a) + list(s.b)) == [1, 2, 4, 5, 9]


def test_history_records_operations():
    s = make([2, 1])
    s.apply("sa")
    s.apply(Operation.RA)
    assert s.history == [Operation.SA, Operation.RA]


def test_is_solved():
    s = make([2, 1])
    assert s.is_solved() is False
    s.apply("sa")
    assert s.is_solved() is True
    s.apply("pb")
    assert s.is_solved() is False


def test_apply_rejects_bad_name():
    s = make([1])
    with pytest.raises(InputError):
        s.apply("swap")
    assert s.history == []


def test_render_layout():
    s = make([1, 2], [3])
    assert s.render() == "A ----- B\n1\t3\n2\t\n"


def test_render_empty():
    assert Stacks().render() == "A ----- B\n"
    s = make([], [8])
    assert s.render() == "A ----- B\n\t8\n"