from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Union

from .collector import DocumentCollector, SingleFileCollector
from .normalizer import normalize_output
from .reporting import SlimReport
from .writer import render_document


Collector = Union[DocumentCollector, SingleFileCollector]


@dataclass
class SlimRun:
    text: str
    report: SlimReport


def run_slim(collector: Collector, source: str, generated_at: Optional[datetime] = None) -> SlimRun:
    """Collect, filter and normalize; nothing is written here."""
    stats: Dict[str, int] = {}
    collected = collector.collect(stats)
    body = normalize_output(collected.lines)
    text = render_document(source, body, generated_at)
    report = SlimReport(
        documents_found=collected.documents_found,
        documents_processed=collected.documents_processed,
        input_bytes=collected.input_bytes,
        output_bytes=len(text.encode("utf-8")),
        stats=stats,
    )
    return SlimRun(text=text, report=report)
