"""Investor profile labels for a given growth/income split."""

from blendcalc.models import InvestorProfile

AGGRESSIVE_GROWTH = InvestorProfile(
    key="aggressive_growth",
    title="Aggressive growth",
    description="Maximum asset growth. Suited to investors who can stomach deep bear markets.",
)
AGGRESSIVE_BALANCE = InvestorProfile(
    key="aggressive_balance",
    title="Aggressive balance",
    description="Pushes returns higher while keeping a dividend safety pin in the mix.",
)
NEUTRAL_BALANCE = InvestorProfile(
    key="neutral_balance",
    title="Neutral balance",
    description="Chases both growth and dividends; the most common split.",
)
STABLE_DIVIDEND = InvestorProfile(
    key="stable_dividend",
    title="Stable dividend",
    description="Dampens volatility and leans on the cash paid out every month.",
)


def classify_profile(growth_weight_pct: int) -> InvestorProfile:
    """Map a growth weight in [0, 100] to its profile (thresholds at 80/60/40)."""
    if growth_weight_pct >= 80:
        return AGGRESSIVE_GROWTH
    if growth_weight_pct >= 60:
        return AGGRESSIVE_BALANCE
    if growth_weight_pct >= 40:
        return NEUTRAL_BALANCE
    return STABLE_DIVIDEND
