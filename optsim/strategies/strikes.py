"""Strike assignment at entry, from entry price S and offset fraction delta."""


def straddle_strikes(entry_price: float, offset: float) -> tuple[float, ...]:
    return (entry_price,)


def strangle_strikes(entry_price: float, offset: float) -> tuple[float, ...]:
    # put below, call above
    return (entry_price * (1 - offset), entry_price * (1 + offset))


def bull_spread_strikes(entry_price: float, offset: float) -> tuple[float, ...]:
    # long call below, short call above
    return (entry_price * (1 - offset), entry_price * (1 + offset))


def bear_spread_strikes(entry_price: float, offset: float) -> tuple[float, ...]:
    # long put above, short put below
    return (entry_price * (1 + offset), entry_price * (1 - offset))


def butterfly_spread_strikes(entry_price: float, offset: float) -> tuple[float, ...]:
    return (entry_price * (1 - offset), entry_price, entry_price * (1 + offset))
