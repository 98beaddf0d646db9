"""Standard output report delivery."""

import json
import sys
from typing import Optional, TextIO

from ..models.report import SimulationReport
from .base import BaseReportDelivery, DeliveryResult, DeliveryStatus

FORMATS = ("pretty", "json")


def format_pretty(report: SimulationReport) -> str:
    """Render a report as the plain-text PnL table."""
    lines = ["Cumulative PnL per Strategy:"]
    for strategy, summary in report.strategies.items():
        line = f"  {strategy.label}: {summary.cumulative_pnl:.6g}"
        if summary.open_trade is not None:
            line += f" (open since tick {summary.open_trade.entry_tick})"
        lines.append(line)
    lines.append(f"Total PnL: {report.total_pnl:.6g}")
    return "\n".join(lines)


def format_json(report: SimulationReport) -> str:
    return json.dumps(report.to_dict())


class StdoutReportDelivery(BaseReportDelivery):
    """Print reports to stdout in pretty or JSON format."""

    def __init__(self, name: str = "stdout", output_format: str = "pretty",
                 stream: Optional[TextIO] = None):
        super().__init__(name)
        if output_format not in FORMATS:
            raise ValueError(f"Unknown report format: {output_format}")
        self.output_format = output_format
        self.stream = stream

    def deliver(self, reports: list[SimulationReport]) -> list[DeliveryResult]:
        """Deliver reports to stdout."""
        results = []
        stream = self.stream or sys.stdout

        for report in reports:
            try:
                print(self._format_report(report), file=stream, flush=True)
            except OSError as e:
                self.logger.error(
                    "Failed to print report",
                    delivery_name=self.name,
                    seed=report.seed,
                    error=str(e)
                )
                results.append(DeliveryResult(
                    status=DeliveryStatus.FAILED,
                    message=f"Stdout error: {str(e)}",
                    error=e
                ))
                continue

            self.logger.debug(
                "Report printed to stdout",
                delivery_name=self.name,
                seed=report.seed
            )
            results.append(DeliveryResult(
                status=DeliveryStatus.SUCCESS,
                message="Printed to stdout"
            ))

        return results

    def _format_report(self, report: SimulationReport) -> str:
        if self.output_format == "json":
            return format_json(report)
        return format_pretty(report)
