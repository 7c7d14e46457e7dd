"""Bitcoin addresses, transactions, sat lookup and block-clock helpers for ordinal-aware wallets."""

__version__ = "0.1.0"
__all__ = [
    "address",
    "clock",
    "primitives",
    "sats",
    "tally",
    "transaction",
]