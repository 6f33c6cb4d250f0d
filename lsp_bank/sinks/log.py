"""Sink that routes reports through the logging module."""

import logging
from typing import Any

from lsp_bank.models.report import AccountSnapshot, TransactionReport
from lsp_bank.sinks.serialization import to_dict


class LogSink:
    """Log each report; rejected transactions are logged as warnings.

    The serialized report is attached as ``extra`` so ``JsonFormatter``
    emits its fields alongside the message.
    """

    def __init__(self, logger_name: str = "lsp_bank.transactions") -> None:
        self.logger = logging.getLogger(logger_name)

    def write(self, report: TransactionReport) -> None:
        level = logging.INFO if report.succeeded else logging.WARNING
        self.logger.log(level, report.message, extra={"extra": to_dict(report)})

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        self.logger.info("%s: %d records", entity_type, len(records))
        for record in records:
            if isinstance(record, TransactionReport):
                self.write(record)
            elif isinstance(record, AccountSnapshot):
                self.logger.info("%s", record.message, extra={"extra": to_dict(record)})
            else:
                self.logger.info("%s", to_dict(record), extra={"extra": to_dict(record)})

    def close(self) -> None:
        pass
