import pytest

from pushswap.stacks import Stacks


def test_initial_state():
    s = Stacks([3, 1, 2])
    assert list(s.a) == [3, 1, 2]
    assert list(s.b) == []
    assert s.moves == []


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert s.moves == ["sa"]


def test_sa_on_single_element_does_nothing():
    s = Stacks([7])
    s.sa()
    assert list(s.a) == [7]
    assert s.moves == []


def test_pb_then_pa_round_trip():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert list(s.a) == [3]
    assert list(s.b) == [2, 1]
    s.pa()
    s.pa()
    assert list(s.a) == [1, 2, 3]
    assert list(s.b) == []
    assert s.moves == ["pb", "pb", "pa", "pa"]


def test_push_from_empty_is_noop():
    s = Stacks([])
    s.pa()
    s.pb()
    assert s.moves == []
    assert list(s.a) == [] and list(s.b) == []


def test_ra_and_rra_are_inverse():
    s = Stacks([1, 2, 3, 4])
    s.ra()
    assert list(s.a) == [2, 3, 4, 1]
    s.rra()
    assert list(s.a) == [1, 2, 3, 4]
    assert s.moves == ["ra", "rra"]


def test_rb_and_rrb_on_b():
    s = Stacks([1, 2, 3])
    for _ in range(3):
        s.pb()
    assert list(s.b) == [3, 2, 1]
    s.rb()
    assert list(s.b) == [2, 1, 3]
    s.rrb()
    assert list(s.b) == [3, 2, 1]


def test_sb_swaps_b():
    s = Stacks([1, 2])
    s.pb()
    s.pb()
    s.sb()
    assert list(s.b) == [1, 2]
    assert s.moves[-1] == "sb"


def test_rotation_on_short_stack_is_noop():
    s = Stacks([5])
    s.ra()
    s.rra()
    s.rb()
    s.rrb()
    assert list(s.a) == [5]
    assert s.moves == []


def test_rr_reports_parts_and_itself():
    s = Stacks([1, 2, 3, 4])
    s.pb()
    s.pb()
    s.moves.clear()
    s.rr()
    assert list(s.a) == [4, 3]
    assert list(s.b) == [1, 2]
    assert s.moves == ["ra", "rb", "rr"]


def test_rr_with_short_b_still_reports_name():
    s = Stacks([1, 2, 3])
    s.rr()
    assert list(s.a) == [2, 3, 1]
    assert s.moves == ["ra", "rr"]


def test_ss_and_rrr_report_parts():
    s = Stacks([1, 2, 3, 4])
    s.pb()
    s.pb()
    s.moves.clear()
    s.ss()
    assert s.moves == ["sa", "sb", "ss"]
    s.moves.clear()
    s.rrr()
    assert s.moves == ["rra", "rrb", "rrr"]


def test_output_callback_receives_names():
    seen = []
    s = Stacks([2, 1], output=seen.append)
    s.sa()
    s.pb()
    assert seen == ["sa", "pb"]
    assert seen == s.moves


@pytest.mark.parametrize("move", ["sa", "ra", "rra", "pb"])
def test_moves_preserve_elements(move):
    s = Stacks([5, 3, 9, 1])
    getattr(s, move)()
    assert sorted(list(s.a) + list(s.b)) == [1, 3, 5, 9]


def test_state_format():
    s = Stacks([1, 2])
    s.pb()
    assert s.state() == (
        "---=== STACK STATE ===---\n"
        "A : 2 // Size = 1\n"
        "B : 1 // Size = 1\n"
        "---------------------------\n"
    )