"""
OptSim - Options Strategy Tick Simulator

A discrete-time market simulator that drives five options-strategy trading
loops (straddle, strangle, bull spread, bear spread, butterfly spread) off a
single geometric Brownian motion price path and reports per-strategy and
aggregate profit/loss.
"""

__version__ = "0.1.0"
__author__ = "OptSim Team"
