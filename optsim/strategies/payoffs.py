"""
Intrinsic payoff at settlement for each strategy shape.

Premiums are not modelled, so the net payoff of a position equals its gross
intrinsic value per unit of volume.
"""


def straddle(settlement: float, strike: float) -> float:
    """Long call plus long put at the same strike."""
    call = max(settlement - strike, 0.0)
    put = max(strike - settlement, 0.0)
    return call + put


def strangle(settlement: float, put_strike: float, call_strike: float) -> float:
    """Long put below and long call above the entry price."""
    put = max(put_strike - settlement, 0.0)
    call = max(settlement - call_strike, 0.0)
    return put + call


def bull_spread(settlement: float, long_strike: float, short_strike: float) -> float:
    """Long call at the lower strike, short call at the higher strike."""
    long_call = max(settlement - long_strike, 0.0)
    short_call = max(settlement - short_strike, 0.0)
    return long_call - short_call


def bear_spread(settlement: float, long_strike: float, short_strike: float) -> float:
    """Long put at the upper strike less max(S - K2, 0) on the lower strike.

    The second leg is call-shaped, not a textbook short put.
    """
    long_put = max(long_strike - settlement, 0.0)
    short_leg = max(settlement - short_strike, 0.0)
    return long_put - short_leg


def butterfly_spread(settlement: float, lower_strike: float, middle_strike: float,
                     upper_strike: float) -> float:
    """Long calls on the wings, two short calls at the body."""
    lower_call = max(settlement - lower_strike, 0.0)
    short_calls = 2.0 * max(settlement - middle_strike, 0.0)
    upper_call = max(settlement - upper_strike, 0.0)
    return lower_call - short_calls + upper_call
