"""Scan loop for the Bitcoin ladder: pipeline, console report and scheduler."""

from __future__ import annotations

from ladder_scanner.scanner.pipeline import scan_ladder
from ladder_scanner.scanner.reporter import format_market, report_markets, report_scan_started
from ladder_scanner.scanner.scheduler import LadderScanner

__all__ = ["LadderScanner", "format_market", "report_markets", "report_scan_started", "scan_ladder"]
