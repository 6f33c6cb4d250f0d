"""Report sinks: where transaction outcomes go."""

from lsp_bank.sinks.base import ReportSink
from lsp_bank.sinks.console import ConsoleSink
from lsp_bank.sinks.json_file import JsonFileSink
from lsp_bank.sinks.log import LogSink
from lsp_bank.sinks.memory import MemorySink

__all__ = ["ConsoleSink", "JsonFileSink", "LogSink", "MemorySink", "ReportSink"]
