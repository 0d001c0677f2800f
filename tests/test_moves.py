import pytest

from pushswap.debug import check_integrity
from pushswap.moves import Operation, Stacks


def _make(values):
    log = []
    return Stacks(values, emit=log.append), log


@pytest.mark.parametrize("op", list(Operation))
def test_each_operation_reports_itself(op):
    stacks, log = _make([3, 1, 2])
    getattr(stacks, op.value)()
    assert log == [op]


def test_default_emit_writes_lines_to_stdout(capsys):
    stacks = Stacks([2, 1])
    stacks.pb()
    stacks.rra()
    assert capsys.readouterr().out == "pb\nrra\n"


def test_operation_str_is_its_name():
    stacks, log = _make([3, 1, 2])
    stacks.rrr()
    assert [str(op) for op in log] == ["rrr"]


def test_sa_swaps_top_two():
    values = [5, 7, 9, 11]
    stacks, _ = _make(values)
    stacks.sa()
    assert list(stacks.a) == [values[1], values[0]] + values[2:]


def test_sa_twice_is_identity():
    values = [5, 7, 9]
    stacks, _ = _make(values)
    stacks.sa()
    stacks.sa()
    assert list(stacks.a) == values


@pytest.mark.parametrize("values", [[], [4]])
def test_swap_too_small_is_noop_but_reported(values):
    stacks, log = _make(values)
    stacks.sa()
    assert list(stacks.a) == values
    assert log == [Operation.SA]


def test_ra_moves_top_to_bottom():
    values = [1, 2, 3, 4]
    stacks, _ = _make(values)
    stacks.ra()
    assert list(stacks.a) == values[1:] + values[:1]


def test_rra_moves_bottom_to_top():
    values = [1, 2, 3, 4]
    stacks, _ = _make(values)
    stacks.rra()
    assert list(stacks.a) == values[-1:] + values[:-1]


def test_ra_then_rra_restores():
    values = [8, 6, 7, 5, 3]
    stacks, _ = _make(values)
    stacks.ra()
    stacks.rra()
    assert list(stacks.a) == values


def test_full_rotation_restores():
    values = [8, 6, 7, 5, 3]
    stacks, _ = _make(values)
    for _ in values:
        stacks.ra()
    assert list(stacks.a) == values


def test_pb_then_pa_restores():
    values = [10, 20, 30]
    stacks, log = _make(values)
    stacks.pb()
    assert list(stacks.a) == values[1:]
    assert list(stacks.b) == values[:1]
    stacks.pa()
    assert list(stacks.a) == values
    assert len(stacks.b) == 0
    assert log == [Operation.PB, Operation.PA]


def test_pa_from_empty_b_is_noop_but_reported():
    values = [1, 2]
    stacks, log = _make(values)
    stacks.pa()
    assert list(stacks.a) == values
    assert len(stacks.b) == 0
    assert log == [Operation.PA]


def test_pushing_all_to_b_reverses_order():
    values = [1, 2, 3, 4]
    stacks, _ = _make(values)
    for _ in values:
        stacks.pb()
    assert list(stacks.b) == list(reversed(values))
    assert len(stacks.a) == 0


def test_double_operations_act_on_both_stacks():
    values = [1, 2, 3, 4, 5, 6]
    stacks, log = _make(values)
    stacks.pb()
    stacks.pb()
    stacks.pb()
    a_before, b_before = list(stacks.a), list(stacks.b)
    stacks.ss()
    assert list(stacks.a) == [a_before[1], a_before[0]] + a_before[2:]
    assert list(stacks.b) == [b_before[1], b_before[0]] + b_before[2:]
    stacks.ss()
    stacks.rr()
    assert list(stacks.a) == a_before[1:] + a_before[:1]
    assert list(stacks.b) == b_before[1:] + b_before[:1]
    stacks.rrr()
    assert list(stacks.a) == a_before
    assert list(stacks.b) == b_before
    assert log[-4:] == [Operation.SS, Operation.SS, Operation.RR, Operation.RRR]


def test_operations_preserve_elements_and_integrity():
    values = [9, -4, 0, 17, 3, 8, -1]
    stacks, log = _make(values)
    sequence = ["pb", "pb", "ra", "rrb", "ss", "pb", "rr", "rrr", "sa", "pa", "sb", "rra", "pa"]
    for name in sequence:
        getattr(stacks, name)()
        assert check_integrity(stacks.a) and check_integrity(stacks.b)
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(values)
    assert [op.value for op in log] == sequence