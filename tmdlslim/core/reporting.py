from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .errors import OutputWriteError
from .utils import format_size


@dataclass
class SlimReport:
    documents_found: int
    documents_processed: int
    input_bytes: int
    output_bytes: int
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def total_removed(self) -> int:
        return sum(self.stats.values())

    @property
    def reduction_percent(self) -> float:
        if self.input_bytes <= 0:
            return 0.0
        return (1 - self.output_bytes / self.input_bytes) * 100

    def sorted_stats(self) -> List[Tuple[str, int]]:
        return sorted(self.stats.items())


class Reporter:
    def __init__(self, report: SlimReport) -> None:
        self.report = report

    def summary_lines(self) -> List[str]:
        r = self.report
        lines = [
            "# Slim Summary",
            "",
            f"- documents: {r.documents_processed} of {r.documents_found} processed",
            f"- input size: {format_size(r.input_bytes)}",
            f"- output size: {format_size(r.output_bytes)}",
            f"- reduction: {r.reduction_percent:.1f}%",
            f"- removed: {r.total_removed}",
        ]
        if r.stats:
            lines.append("")
            lines.append("## Removed by rule")
            for name, count in r.sorted_stats():
                lines.append(f"- {name}: {count}")
        return lines

    def render(self) -> str:
        return "\n".join(self.summary_lines()) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        r = self.report
        return {
            "documents_found": r.documents_found,
            "documents_processed": r.documents_processed,
            "input_bytes": r.input_bytes,
            "output_bytes": r.output_bytes,
            "reduction_percent": round(r.reduction_percent, 2),
            "total_removed": r.total_removed,
            "removed": dict(r.sorted_stats()),
        }

    def write_json(self, path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(path, exc.strerror or str(exc)) from exc
