"""
Signal derivation module.

Maps the per-tick indicator snapshot to one ENTER / EXIT / HOLD signal
per strategy.
"""

from .models import Signal

__all__ = ["Signal"]
