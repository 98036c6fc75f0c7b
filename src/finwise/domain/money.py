"""Exact decimal arithmetic for ledger balances.

Sums and differences are computed with a precision wide enough to hold the
exact result, independent of the process-wide decimal context.
"""

from decimal import Context, Decimal, Inexact, InvalidOperation, localcontext
from typing import Iterable


def _exact_context(values: list[Decimal]) -> Context:
    """Context whose precision covers every digit position of the operands."""
    highest = max(v.as_tuple().exponent + len(v.as_tuple().digits) for v in values)
    lowest = min(v.as_tuple().exponent for v in values)
    # room for the carries of adding len(values) terms
    prec = highest - lowest + len(str(len(values))) + 1
    context = Context(prec=prec, traps=[Inexact, InvalidOperation])
    context.Emax = max(context.Emax, highest + 1)
    context.Emin = min(context.Emin, lowest - 1)
    return context


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum decimals without rounding. Returns Decimal zero for no values."""
    terms = list(values)
    if not terms:
        return Decimal("0")
    with localcontext(_exact_context(terms)):
        total = terms[0]
        for term in terms[1:]:
            total += term
        return total


def exact_subtract(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    with localcontext(_exact_context([minuend, subtrahend])):
        return minuend - subtrahend


def exact_add(augend: Decimal, addend: Decimal) -> Decimal:
    return exact_sum([augend, addend])
