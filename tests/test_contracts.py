"""Tests for the substitutability checks and the counter-example accounts."""

from decimal import Decimal

import pytest

from lsp_bank.accounts import CurrentAccount, DepositOnly, FixedTermAccount, SavingsAccount, Withdrawable
from lsp_bank.antipatterns import CheatAccount, FixedDepositAccount
from lsp_bank.contracts import (
    assert_substitutable,
    check_deposit_only,
    check_invariant,
    check_withdrawable,
)
from lsp_bank.exceptions import ContractViolationError, InvalidArgumentError, UnsupportedOperationError
from lsp_bank.models import Ok


class TestShippedVariants:
    """Every account create_account can build passes its checks."""

    @pytest.mark.parametrize("variant", [SavingsAccount, CurrentAccount])
    def test_withdrawable_variants_pass(self, variant) -> None:
        assert check_withdrawable(variant) == []
        assert_substitutable(variant, Withdrawable)

    @pytest.mark.parametrize("variant", [SavingsAccount, CurrentAccount, FixedTermAccount])
    def test_all_variants_are_deposit_only(self, variant) -> None:
        assert check_deposit_only(variant) == []
        assert_substitutable(variant, DepositOnly)

    def test_fixed_term_lacks_withdrawable_capability(self) -> None:
        assert check_withdrawable(FixedTermAccount) == ["does not provide the Withdrawable capability"]

        with pytest.raises(ContractViolationError):
            assert_substitutable(FixedTermAccount, Withdrawable)


class TestCheatAccount:
    """CheatAccount lets the balance go negative."""

    def test_withdraw_drives_balance_negative(self) -> None:
        account = CheatAccount(Decimal("100"))

        assert account.withdraw(Decimal("200")) == Ok(Decimal("-100"))
        assert account.balance == Decimal("-100")
        assert check_invariant(account) == ["balance is negative (-100)"]

    def test_opening_balance_still_validated(self) -> None:
        with pytest.raises(InvalidArgumentError):
            CheatAccount(Decimal("-1"))

    def test_fails_withdrawable_check(self) -> None:
        violations = check_withdrawable(CheatAccount)

        assert "uncovered withdraw of 200 from 100 was applied" in violations
        assert "balance is negative (-100)" in violations

    def test_assert_substitutable_raises(self) -> None:
        with pytest.raises(ContractViolationError) as exc_info:
            assert_substitutable(CheatAccount)

        assert exc_info.value.subject == "CheatAccount"


class TestFixedDepositAccount:
    """FixedDepositAccount advertises withdraw and then refuses it."""

    def test_looks_withdrawable(self) -> None:
        assert isinstance(FixedDepositAccount(), Withdrawable)

    def test_withdraw_refused(self) -> None:
        account = FixedDepositAccount(Decimal("100"))

        with pytest.raises(UnsupportedOperationError, match="Withdraw not allowed"):
            account.withdraw(Decimal("50"))
        assert account.balance == Decimal("100")

    def test_fails_withdrawable_check(self) -> None:
        violations = check_withdrawable(FixedDepositAccount)

        assert violations == ["withdraw refused outright: Withdraw not allowed in Fixed Deposit"]

    def test_passes_deposit_only_check(self) -> None:
        assert check_deposit_only(FixedDepositAccount) == []

    def test_refusal_with_builtin_exception_is_reported(self) -> None:
        class RuntimeRefusalAccount(FixedDepositAccount):
            def withdraw(self, amount):
                raise RuntimeError("Withdraw not allowed in Fixed Deposit")

        violations = check_withdrawable(RuntimeRefusalAccount)

        assert violations == ["withdraw refused outright: Withdraw not allowed in Fixed Deposit"]
        with pytest.raises(ContractViolationError):
            assert_substitutable(RuntimeRefusalAccount)


class TestCheckHelpers:
    """Edge cases of the check functions."""

    def test_check_invariant_clean(self, savings: SavingsAccount) -> None:
        assert check_invariant(savings) == []

    def test_factory_accepting_negative_opening_is_flagged(self) -> None:
        def lenient(opening: Decimal) -> SavingsAccount:
            return SavingsAccount(max(opening, Decimal("0")))

        assert "opening with a negative balance was accepted" in check_withdrawable(lenient)

    def test_non_account_is_rejected(self) -> None:
        assert check_deposit_only(lambda opening: object()) == [
            "does not provide the DepositOnly capability"
        ]

    def test_unknown_capability(self) -> None:
        with pytest.raises(InvalidArgumentError):
            assert_substitutable(SavingsAccount, int)

    def test_custom_name_in_error(self) -> None:
        with pytest.raises(ContractViolationError, match="my-cheat"):
            assert_substitutable(CheatAccount, name="my-cheat")
