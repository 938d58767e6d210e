"""Settle debts among friends with as few cash transfers as the greedy allows."""

from bisect import insort
from typing import Iterable

Transaction = tuple[int, int, int]


def net_balances(friends: int, transactions: Iterable[Transaction]) -> list[int]:
    """Return each friend's net balance.

    Each transaction ``(giver, receiver, amount)`` lowers the giver's balance
    and raises the receiver's by ``amount``.
    """
    net = [0] * friends
    for giver, receiver, amount in transactions:
        for person in (giver, receiver):
            if not 0 <= person < friends:
                raise ValueError(f"friend {person} is outside 0..{friends - 1}")
        net[giver] -= amount
        net[receiver] += amount
    return net


def min_settlement_transactions(friends: int, transactions: Iterable[Transaction]) -> int:
    """Return how many transfers settle all balances.

    The largest debtor repeatedly pays the largest creditor as much as
    either can take.
    """
    pending = sorted(b for b in net_balances(friends, transactions) if b)
    transfers = 0
    while pending:
        debit = pending.pop(0)
        credit = pending.pop() if pending else 0
        amount = min(-debit, credit)
        debit += amount
        credit -= amount
        if debit:
            insort(pending, debit)
        if credit:
            insort(pending, credit)
        transfers += 1
    return transfers