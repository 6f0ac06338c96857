"""Two-fund blend backtest calculator."""
