"""SOL and SPL token balance report for a list of wallets."""

__version__ = "0.1.0"
