"""
Trade lifecycle module.

Manages the per-strategy FLAT -> OPEN -> FLAT state machine and the
cumulative PnL folded in at each trade closure.
"""
