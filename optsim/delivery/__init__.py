"""Report delivery: rendering a finished simulation report to its consumer."""

from .base import BaseReportDelivery, DeliveryResult, DeliveryStatus
from .stdout_delivery import StdoutReportDelivery

__all__ = [
    "BaseReportDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "StdoutReportDelivery",
]
