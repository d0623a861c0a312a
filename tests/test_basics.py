import pytest

from dsakit.basics import (
    Move,
    Student,
    booth_multiply,
    booth_trace,
    celsius_to_fahrenheit,
    fibonacci,
    hanoi_moves,
    multiplication_table,
    reverse_each_word,
)


def test_celsius_source_example():
    assert celsius_to_fahrenheit(20.0) == pytest.approx(68.0)


def test_celsius_fixed_points():
    assert celsius_to_fahrenheit(0) == pytest.approx(32.0)
    assert celsius_to_fahrenheit(-40) == pytest.approx(-40)


def test_multiplication_table_lines_are_consistent():
    lines = multiplication_table(7)
    assert len(lines) == 10
    for index, line in enumerate(lines, 1):
        left, right = line.split(" = ")
        number, factor = left.split(" * ")
        assert int(number) == 7
        assert int(factor) == index
        assert int(right) == int(number) * int(factor)


def test_fibonacci_recurrence():
    terms = fibonacci(20)
    assert len(terms) == 20
    assert terms[:2] == [0, 1]
    assert all(terms[k] == terms[k - 1] + terms[k - 2] for k in range(2, 20))


def test_fibonacci_short_counts():
    assert fibonacci(0) == []
    assert fibonacci(1) == [0]


@pytest.mark.parametrize("disks", [1, 2, 3, 6])
def test_hanoi_moves_are_legal_and_complete(disks):
    moves = hanoi_moves(disks)
    assert len(moves) == 2**disks - 1
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    for move in moves:
        disk = pegs[move.source].pop()
        assert disk == move.disk
        assert not pegs[move.target] or pegs[move.target][-1] > disk
        pegs[move.target].append(disk)
    assert pegs["B"] == list(range(disks, 0, -1))


def test_hanoi_zero_and_negative():
    assert hanoi_moves(0) == []
    with pytest.raises(ValueError):
        hanoi_moves(-1)


def test_move_text():
    move = Move(3, "A", "C", "B")
    assert str(move) == "Move disk 3 from A to C"


@pytest.mark.parametrize("text", ["Hello World", "one  two three", "single", ""])
def test_reverse_each_word_is_involution(text):
    assert reverse_each_word(reverse_each_word(text)) == text


def test_reverse_each_word_single_word_and_word_count():
    assert reverse_each_word("abcdef") == "abcdef"[::-1]
    text = "the quick brown fox"
    assert len(reverse_each_word(text).split(" ")) == len(text.split(" "))


@pytest.mark.parametrize("a", range(-9, 10))
@pytest.mark.parametrize("b", [-8, -6, -1, 0, 1, 5, 7, 10])
def test_booth_multiply_matches_product(a, b):
    assert booth_multiply(a, b) == a * b


def test_booth_trace_shape():
    steps = booth_trace(6, -6)
    assert steps[0].operation == "initial"
    assert steps[0].accumulator == "0" * len(steps[0].multiplier)
    assert len(steps) == steps[0].count + 1
    assert steps[-1].count == 0
    assert {s.operation for s in steps[1:]} <= {"add", "subtract", "shift"}


def test_booth_trace_final_registers_hold_product():
    steps = booth_trace(6, -6)
    last = steps[-1]
    bits = last.accumulator + last.multiplier
    value = int(bits, 2) - (1 << len(bits)) if bits[0] == "1" else int(bits, 2)
    assert value == booth_multiply(6, -6)


def test_student_describe():
    student = Student("Asha", 1, 9.5)
    assert student.describe() == "Roll number: 1\nName: Asha\nMarks: 9.5"