"""JSON Output Sink for publishing route tables."""

import json
import logging
from pathlib import Path

from polypost.core.types import RouteTable

logger = logging.getLogger(__name__)


class JsonRouteSink:
    """Writes a RouteTable as a single deterministic JSON file.

    Routes are sorted by path and documents by slug, so an unchanged
    content set always produces byte-identical output.
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the JSON route sink.

        Args:
            output_path: File the route table will be written to

        """
        self.output_path = Path(output_path)

    def render(self, table: RouteTable) -> str:
        return json.dumps(table.to_dict(), ensure_ascii=False, indent=2, default=str) + "\n"

    def publish(self, table: RouteTable) -> None:
        """Write the table, creating parent directories as needed."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(self.render(table), encoding="utf-8")
        logger.info("Wrote %d routes to %s", len(table.routes), self.output_path)
