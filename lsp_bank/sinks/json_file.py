"""JSON file sink for exporting reports to files."""

import json
import logging
from pathlib import Path
from typing import IO, Any

from lsp_bank.models.report import TransactionReport
from lsp_bank.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output reports to JSON files.

    Single reports are appended to ``transactions.jsonl``; batches are
    written to ``<entity_type>.json``.
    """

    STREAM_FILENAME = "transactions.jsonl"

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print batch files.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}
        self._stream: IO[str] | None = None

    @property
    def stream_path(self) -> Path:
        return self.output_dir / self.STREAM_FILENAME

    def write(self, report: TransactionReport) -> None:
        """Append one report as a JSON line."""
        if self._stream is None:
            self._stream = open(self.stream_path, "a", encoding="utf-8")
        self._stream.write(json.dumps(to_dict(report), ensure_ascii=False, default=str) + "\n")
        self._counts["transactions"] = self._counts.get("transactions", 0) + 1

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to a JSON file."""
        file_path = self.output_dir / f"{entity_type}.json"

        data = [to_dict(record) for record in records]

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)

        self._counts[entity_type] = len(records)

    def close(self) -> None:
        """Close the stream file and log a summary."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
