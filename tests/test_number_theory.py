import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.number_theory import count_set_bits, euler_totient, gcd, josephus


def test_totient_sample():
    assert euler_totient(12) == 4


@given(st.integers(min_value=1, max_value=300))
def test_totient_counts_coprimes(n):
    expected = sum(1 for i in range(1, n + 1) if math.gcd(i, n) == 1)
    assert euler_totient(n) == expected


def test_gcd_sample():
    assert gcd(18, 24) == 6


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**9))
def test_gcd_matches_stdlib(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_josephus_sample():
    assert josephus(7, 3) == 4


@given(st.integers(min_value=1, max_value=200))
def test_josephus_step_one_leaves_last(n):
    assert josephus(n, 1) == n


@given(st.integers(min_value=0, max_value=10))
def test_josephus_step_two_power_of_two(exponent):
    assert josephus(2**exponent, 2) == 1


@given(st.integers(min_value=1, max_value=100), st.integers(min_value=1, max_value=100))
def test_josephus_result_in_circle(n, k):
    assert 1 <= josephus(n, k) <= n


def test_josephus_rejects_empty_circle():
    with pytest.raises(ValueError):
        josephus(0, 3)


@given(st.integers(min_value=0, max_value=2**63 - 1))
def test_set_bits_matches_binary(n):
    assert count_set_bits(n) == bin(n).count("1")


def test_set_bits_negative_uses_word():
    assert count_set_bits(-1) == 64