"""In-memory sink, mostly for tests and scenario results."""

from typing import Any

from lsp_bank.models.report import TransactionReport


class MemorySink:
    """Collect reports in a list."""

    def __init__(self) -> None:
        self.reports: list[TransactionReport] = []
        self.batches: dict[str, list[Any]] = {}
        self.closed = False

    def write(self, report: TransactionReport) -> None:
        self.reports.append(report)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        self.batches.setdefault(entity_type, []).extend(records)

    def close(self) -> None:
        self.closed = True
