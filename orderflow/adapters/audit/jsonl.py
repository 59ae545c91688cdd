"""JSON Lines audit adapter.

Implements AuditPort by appending one JSON object per submission to a
file. Useful for keeping a persistent audit trail between runs.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from orderflow.adapters.serialization import order_to_dict, response_to_dict
from orderflow.core.models import Order, OrderResponse
from orderflow.core.ports import AuditPort

logger = logging.getLogger(__name__)


class JsonLinesAuditLogger(AuditPort):
    """Appends audit records to a .jsonl file."""

    def __init__(self, output_path: str):
        """Initialize JSON Lines audit logger.

        Args:
            output_path: File to append records to. Parent directories
                are created if missing.

        Raises:
            ValueError: If output_path points at an existing directory.
            OSError: If the parent directory cannot be created.
        """
        self.output_path = Path(output_path).resolve()

        if self.output_path.is_dir():
            raise ValueError(f"output_path is a directory: {output_path}")

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(
                f"Failed to create audit directory {self.output_path.parent}: {e}"
            ) from e

    def log_order(self, order: Order, response: OrderResponse) -> None:
        """Append one record.

        Raises:
            OSError: If the file cannot be written.
        """
        record = {
            "logged_at": datetime.now(UTC).isoformat(),
            "order": order_to_dict(order),
            "response": response_to_dict(response),
        }

        try:
            with self.output_path.open("a", encoding="utf-8") as fh:
                fh.write(json.dumps(record) + "\n")
        except OSError as e:
            logger.error(
                f"Failed to write audit record: {e}",
                extra={"path": str(self.output_path)},
                exc_info=True,
            )
            raise

        logger.debug(f"Wrote audit record to {self.output_path}")

    def read_records(self) -> list[dict]:
        """Read back every record written so far, oldest first."""
        if not self.output_path.exists():
            return []
        with self.output_path.open(encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]
