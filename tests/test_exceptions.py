"""Tests for custom exception hierarchy."""

from decimal import Decimal

from lsp_bank.exceptions import (
    ConfigurationError,
    ContractViolationError,
    InsufficientFundsError,
    InvalidArgumentError,
    LspBankError,
    SinkError,
    UnsupportedOperationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_lsp_bank_error_is_exception(self) -> None:
        assert isinstance(LspBankError("test"), Exception)

    def test_invalid_argument_is_value_error(self) -> None:
        err = InvalidArgumentError("test")
        assert isinstance(err, LspBankError)
        assert isinstance(err, ValueError)

    def test_insufficient_funds_is_lsp_bank_error(self) -> None:
        assert isinstance(InsufficientFundsError(Decimal("1"), Decimal("2")), LspBankError)

    def test_unsupported_operation_is_lsp_bank_error(self) -> None:
        assert isinstance(UnsupportedOperationError("test"), LspBankError)

    def test_contract_violation_is_lsp_bank_error(self) -> None:
        assert isinstance(ContractViolationError("X", ["bad"]), LspBankError)

    def test_configuration_error_is_lsp_bank_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LspBankError)

    def test_sink_error_is_lsp_bank_error(self) -> None:
        assert isinstance(SinkError("test"), LspBankError)


class TestExceptionDetails:
    """Test attributes and messages."""

    def test_insufficient_funds_fields(self) -> None:
        err = InsufficientFundsError(Decimal("100"), Decimal("200"), "Savings Account")

        assert err.balance == Decimal("100")
        assert err.amount == Decimal("200")
        assert err.label == "Savings Account"
        assert str(err) == "Insufficient funds in Savings Account: balance 100, requested 200"

    def test_contract_violation_lists_violations(self) -> None:
        err = ContractViolationError("CheatAccount", ["a", "b"])

        assert err.subject == "CheatAccount"
        assert err.violations == ["a", "b"]
        assert str(err) == "CheatAccount violates its contract: a; b"
