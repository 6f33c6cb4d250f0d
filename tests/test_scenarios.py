"""Tests for scenarios."""

from decimal import Decimal

from lsp_bank.config import ClientConfig
from lsp_bank.models import TransactionStatus
from lsp_bank.scenarios import (
    HistoryConstraintScenario,
    InvariantScenario,
    RandomPortfolioScenario,
    ScenarioResult,
    SubstitutionScenario,
)
from lsp_bank.sinks import MemorySink


class TestScenarioResult:
    """Tests for ScenarioResult."""

    def test_clean_result_is_ok(self) -> None:
        result = ScenarioResult(name="x", violations={"SavingsAccount": []})

        assert result.ok is True
        assert result.unexpected == {}

    def test_unexpected_violation(self) -> None:
        result = ScenarioResult(name="x", violations={"SavingsAccount": ["bad"]})

        assert result.ok is False
        assert result.unexpected == {"SavingsAccount": ["bad"]}

    def test_expected_violator_that_passes(self) -> None:
        result = ScenarioResult(
            name="x",
            violations={"CheatAccount": []},
            expected_violators={"CheatAccount"},
        )

        assert result.ok is False


class TestSubstitutionScenario:
    """Tests for SubstitutionScenario."""

    def test_run(self, memory_sink: MemorySink) -> None:
        result = SubstitutionScenario(sink=memory_sink).run()

        assert result.ok
        assert [r.message for r in result.reports] == [
            "Deposited: 1000 in Savings Account. New Balance: 1000",
            "Withdrawn: 500 from Savings Account. New Balance: 500",
            "Deposited: 1000 in Current Account. New Balance: 1000",
            "Withdrawn: 500 from Current Account. New Balance: 500",
            "Deposited: 5000 in Fixed Term Account. New Balance: 5000",
        ]
        assert memory_sink.reports == result.reports
        assert set(result.violations) == {"SavingsAccount", "CurrentAccount", "FixedTermAccount"}

    def test_custom_config(self) -> None:
        config = ClientConfig(deposit_amount=Decimal("10"), withdraw_amount=Decimal("20"))

        result = SubstitutionScenario(config=config).run()

        rejected = [r for r in result.reports if r.status == TransactionStatus.REJECTED]
        assert len(rejected) == 2
        assert result.ok


class TestInvariantScenario:
    """Tests for InvariantScenario."""

    def test_run(self) -> None:
        result = InvariantScenario().run()

        assert result.ok
        assert result.reports[0].message == "Withdrawn: 100 from Savings Account. New Balance: 0"
        assert result.reports[1].balance == Decimal("-100")
        assert result.violations["SavingsAccount"] == []
        assert result.violations["CheatAccount"]
        assert any("Negative opening balance rejected" in n for n in result.notes)
        assert "Cheat Account: balance is negative (-100)" in result.notes


class TestHistoryConstraintScenario:
    """Tests for HistoryConstraintScenario."""

    def test_run(self, memory_sink: MemorySink) -> None:
        result = HistoryConstraintScenario(sink=memory_sink).run()

        assert result.ok
        assert len(result.reports) == 1
        assert result.reports[0].balance == Decimal("0")
        assert result.violations["FixedDepositAccount"]
        assert result.violations["FixedTermAccount"] == []
        assert "Fixed Deposit Account broke the client: Withdraw not allowed in Fixed Deposit" in result.notes
        assert "Fixed Term Account does not offer withdraw" in result.notes


class TestRandomPortfolioScenario:
    """Tests for RandomPortfolioScenario."""

    def test_run(self, seed: int, memory_sink: MemorySink) -> None:
        result = RandomPortfolioScenario(num_accounts=25, seed=seed, sink=memory_sink).run()

        assert result.ok
        assert result.violations == {}
        assert len(memory_sink.reports) == len(result.reports)
        assert all(r.balance >= 0 for r in result.reports)

    def test_reproducible(self, seed: int) -> None:
        first = RandomPortfolioScenario(num_accounts=10, seed=seed).run()
        second = RandomPortfolioScenario(num_accounts=10, seed=seed).run()

        assert [r.message for r in first.reports] == [r.message for r in second.reports]

    def test_includes_rejections_when_withdrawal_exceeds_funds(self, seed: int) -> None:
        config = ClientConfig(deposit_amount=Decimal("0"), withdraw_amount=Decimal("1000000"))

        result = RandomPortfolioScenario(num_accounts=20, seed=seed, config=config).run()

        withdrawals = [r for r in result.reports if r.transaction_type == "WITHDRAW"]
        assert withdrawals
        assert all(r.status == TransactionStatus.REJECTED for r in withdrawals)
        assert result.ok

    def test_default_amounts_cover_every_withdrawal(self, seed: int) -> None:
        result = RandomPortfolioScenario(num_accounts=25, seed=seed).run()

        assert all(r.succeeded for r in result.reports)

    def test_exports_closing_balances(self, seed: int, memory_sink: MemorySink) -> None:
        RandomPortfolioScenario(num_accounts=12, seed=seed, sink=memory_sink).run()

        snapshots = memory_sink.batches["accounts"]
        assert len(snapshots) == 12
        closing = {r.account_id: r.balance for r in memory_sink.reports}
        assert {s.account_id: s.balance for s in snapshots} == closing
        fixed_ids = {r.account_id for r in memory_sink.reports if r.label.startswith("Fixed Term")}
        assert all(s.withdrawable == (s.account_id not in fixed_ids) for s in snapshots)
