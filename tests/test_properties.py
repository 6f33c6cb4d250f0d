"""Property-based tests for the balance invariant and substitutability."""

from decimal import Decimal, localcontext

from hypothesis import given, settings
from hypothesis import strategies as st

from lsp_bank.accounts import CurrentAccount, FixedTermAccount, SavingsAccount
from lsp_bank.exceptions import InsufficientFundsError, InvalidArgumentError

money = st.decimals(min_value=0, max_value=1_000_000, places=2, allow_nan=False, allow_infinity=False)
# Wide enough that some sums need more than the default 28 significant digits
large = st.decimals(min_value=0, max_value=Decimal("1E+30"), places=4, allow_nan=False, allow_infinity=False)
amounts = st.one_of(money, large)
operations = st.lists(st.tuples(st.sampled_from(["deposit", "withdraw"]), amounts), max_size=50)
withdrawable_variants = st.sampled_from([SavingsAccount, CurrentAccount])


def exact_sum(left: Decimal, right: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 100
        return left + right


def exact_difference(left: Decimal, right: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 100
        return left - right


def apply(account, name: str, amount: Decimal) -> tuple:
    """Run one operation and describe its outcome."""
    try:
        if name == "deposit":
            return ("ok", account.deposit(amount))
        result = account.withdraw(amount)
    except InvalidArgumentError:
        return ("rejected",)
    if result.is_ok:
        return ("ok", result.value)
    return ("err", type(result.error))


class TestInvariantPreservation:
    """The balance stays non-negative under any operation sequence."""

    @given(variant=withdrawable_variants, opening=amounts, ops=operations)
    @settings(max_examples=200)
    def test_balance_never_negative(self, variant, opening, ops) -> None:
        account = variant(opening)

        for name, amount in ops:
            before = account.balance
            outcome = apply(account, name, amount)

            if outcome[0] == "rejected":
                assert account.balance == before
            elif name == "deposit":
                assert account.balance == exact_sum(before, amount)
            elif amount <= before:
                assert outcome[0] == "ok"
                assert account.balance == exact_difference(before, amount)
            else:
                assert outcome == ("err", InsufficientFundsError)
                assert account.balance == before
            assert account.balance >= 0

    @given(opening=amounts, deposits=st.lists(amounts, max_size=30))
    def test_fixed_term_only_grows(self, opening, deposits) -> None:
        account = FixedTermAccount(opening)

        for amount in deposits:
            before = account.balance
            if apply(account, "deposit", amount)[0] == "ok":
                assert account.balance == exact_sum(before, amount)
            else:
                assert account.balance == before
            assert account.balance >= 0


class TestSubstitutability:
    """Savings and current accounts are observably identical."""

    @given(opening=amounts, ops=operations)
    @settings(max_examples=200)
    def test_same_outcomes_for_same_operations(self, opening, ops) -> None:
        savings = SavingsAccount(opening)
        current = CurrentAccount(opening)

        for name, amount in ops:
            assert apply(savings, name, amount) == apply(current, name, amount)
            assert savings.balance == current.balance
