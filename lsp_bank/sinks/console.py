"""Console sink for demos and debugging."""

import json
from typing import Any

from lsp_bank.models.report import AccountSnapshot, TransactionReport
from lsp_bank.sinks.serialization import to_dict


class ConsoleSink:
    """Output reports to console (stdout)."""

    def __init__(self, pretty: bool = False, human: bool = True) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        human : bool
            Print reports and snapshots as one readable line instead of JSON.
        """
        self.pretty = pretty
        self.human = human
        self._counts: dict[str, int] = {}

    def write(self, report: TransactionReport) -> None:
        """Print a single transaction report."""
        self._print(report)
        self._counts["transactions"] = self._counts.get("transactions", 0) + 1

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console."""
        print(f"\n{'='*60}")
        print(f"Entity: {entity_type} ({len(records)} records)")
        print("=" * 60)

        for record in records:
            self._print(record)

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _print(self, record: Any) -> None:
        if self.human and isinstance(record, (TransactionReport, AccountSnapshot)):
            print(record.message)
            return
        data = to_dict(record)
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        else:
            print(json.dumps(data, ensure_ascii=False, default=str))
