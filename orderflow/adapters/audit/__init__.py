"""Audit adapters for recording submission outcomes.

Implementations support multiple output channels:
- Stdout (terminal pretty-print)
- Logging (records through the logging module)
- JSON Lines file (append one record per submission)
"""

from .jsonl import JsonLinesAuditLogger
from .log import LoggingAuditLogger
from .stdout import StdoutAuditLogger

__all__ = ["JsonLinesAuditLogger", "LoggingAuditLogger", "StdoutAuditLogger"]
