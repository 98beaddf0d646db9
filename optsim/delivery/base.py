"""Base classes for report delivery mechanisms."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import structlog

from ..models.report import SimulationReport


class DeliveryStatus(Enum):
    """Report delivery status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DeliveryResult:
    """Result of a report delivery attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    error: Optional[Exception] = None


class BaseReportDelivery(ABC):
    """Base class for report delivery mechanisms."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"report.delivery.{name}")

    @abstractmethod
    def deliver(self, reports: list[SimulationReport]) -> list[DeliveryResult]:
        """
        Deliver reports to the configured destination.

        Args:
            reports: Finished simulation reports, one per replica

        Returns:
            One DeliveryResult per report
        """
        pass
