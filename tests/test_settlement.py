import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.settlement import min_settlement_transactions, net_balances

SAMPLE = [(0, 1, 100), (1, 2, 50), (2, 0, 30)]


def test_sample_settlement():
    assert min_settlement_transactions(3, SAMPLE) == 2


def test_no_transactions():
    assert min_settlement_transactions(4, []) == 0
    assert net_balances(4, []) == [0, 0, 0, 0]


def test_round_trip_cancels_out():
    assert min_settlement_transactions(2, [(0, 1, 40), (1, 0, 40)]) == 0


def test_rejects_unknown_friend():
    with pytest.raises(ValueError):
        net_balances(2, [(0, 2, 10)])


def test_rejects_negative_friend():
    with pytest.raises(ValueError):
        min_settlement_transactions(2, [(-1, 0, 10)])


_ledgers = st.integers(min_value=1, max_value=6).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(
            st.tuples(
                st.integers(0, n - 1), st.integers(0, n - 1), st.integers(1, 200)
            ),
            max_size=15,
        ),
    )
)


@given(_ledgers)
def test_balances_sum_to_zero(ledger):
    friends, transactions = ledger
    assert sum(net_balances(friends, transactions)) == 0


@given(_ledgers)
def test_transfer_count_bounds(ledger):
    friends, transactions = ledger
    nonzero = sum(1 for b in net_balances(friends, transactions) if b)
    transfers = min_settlement_transactions(friends, transactions)
    if nonzero == 0:
        assert transfers == 0
    else:
        assert (nonzero + 1) // 2 <= transfers <= nonzero - 1