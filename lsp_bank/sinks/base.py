"""Interface shared by all report sinks."""

from typing import Any, Protocol

from lsp_bank.models.report import TransactionReport


class ReportSink(Protocol):
    """Receives transaction outcomes from the bank client."""

    def write(self, report: TransactionReport) -> None:
        ...

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        ...

    def close(self) -> None:
        ...
