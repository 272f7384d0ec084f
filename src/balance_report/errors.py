"""Error types for the balance report.

Every failure is fatal to the run; these only exist so the entry point can
tell a reportable failure from a bug.
"""


class BalanceReportError(Exception):
    """Base class for all report failures."""


class ConfigFileError(BalanceReportError):
    """Config file is missing or unreadable."""


class ConfigParseError(BalanceReportError):
    """Config file is not valid YAML or does not match the schema."""


class AddressDecodeError(BalanceReportError):
    """A wallet or mint string is not a valid base58 public key."""

    def __init__(self, address: str, reason: str = ""):
        self.address = address
        msg = f"Invalid address '{address}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class RpcError(BalanceReportError):
    """Transport or JSON-RPC failure while talking to the node."""
