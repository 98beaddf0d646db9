"""
Tick-scoped value objects and run reports.

Immutable data structures produced fresh each tick (indicator snapshots)
and once per run (simulation reports).
"""
