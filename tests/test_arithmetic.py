import math
from itertools import permutations

import pytest

from algokit.arithmetic import (
    Calculator,
    factorial,
    fibonacci,
    integer_sqrt,
    is_armstrong,
    is_even,
    knapsack,
    largest_of_three,
    mars_exploration,
    primes_up_to,
)


def test_calculator_defaults_add():
    assert Calculator().add() == 48


def test_calculator_sub_is_symmetric():
    assert Calculator(5, 9).sub() == Calculator(9, 5).sub()
    assert Calculator(5, 9).sub() >= 0


def test_calculator_multiply_and_greater():
    calc = Calculator(4, 7)
    assert calc.multiply() == 28
    assert calc.greater() == 7
    assert Calculator(7, 4).greater() == 7


def test_calculator_divide_integer_truncates():
    assert Calculator(2, 7).divide() == Calculator(7, 2).divide()
    assert Calculator(7, 2).divide() == 3


def test_calculator_divide_float():
    assert Calculator(1.0, 4.0).divide() == pytest.approx(4.0)


def test_calculator_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        Calculator(0, 5).divide()


def test_knapsack_classic():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_zero_capacity():
    assert knapsack(0, [1, 2], [10, 20]) == 0


def test_knapsack_all_fit_sums_values():
    assert knapsack(100, [1, 2, 3], [5, 6, 7]) == 18


def test_knapsack_more_capacity_never_worse():
    weights, values = [3, 4, 5, 9], [4, 5, 6, 11]
    results = [knapsack(c, weights, values) for c in range(25)]
    assert results == sorted(results)


def test_knapsack_errors():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [1])
    with pytest.raises(ValueError):
        knapsack(-1, [], [])
    with pytest.raises(ValueError):
        knapsack(5, [-1], [3])


def test_primes_up_to_thirty():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_primes_small_inputs():
    assert primes_up_to(1) == []
    assert primes_up_to(2) == [2]


def test_primes_up_to_two_hundred():
    primes = primes_up_to(200)
    assert len(primes) == 46
    assert primes[-1] == 199
    assert primes[-5:] == [179, 181, 191, 193, 197, 199][-5:]
    assert primes == sorted(set(primes))


def test_integer_sqrt_source_example():
    assert integer_sqrt(11) == 3


def test_integer_sqrt_invariant():
    for x in range(0, 500):
        r = integer_sqrt(x)
        assert r * r <= x < (r + 1) * (r + 1)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-4)


@pytest.mark.parametrize("n", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(n):
    assert is_armstrong(n) is True


@pytest.mark.parametrize("n", [2, 10, 154, 100, -153])
def test_not_armstrong_numbers(n):
    assert is_armstrong(n) is False


def test_factorial_matches_math():
    for n in range(0, 20):
        assert factorial(n) == math.factorial(n)


def test_factorial_below_two_is_one():
    assert factorial(-3) == 1


def test_fibonacci_recurrence():
    terms = fibonacci(20)
    assert len(terms) == 20
    assert terms[:2] == [0, 1]
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert a + b == c


def test_fibonacci_empty():
    assert fibonacci(0) == []


def test_is_even():
    assert is_even(4) is True
    assert is_even(7) is False
    assert is_even(-2) is True


def test_largest_of_three_any_order():
    for a, b, c in permutations([3, 9, 5]):
        assert largest_of_three(a, b, c) == 9


def test_mars_exploration():
    assert mars_exploration("sossos") == 0
    assert mars_exploration("sosxos") == 1
    assert mars_exploration("") == 0


def test_mars_exploration_bounded_by_length():
    message = "abcdefghi"
    assert mars_exploration(message) == 9