"""
Config loader for the balance report.

Reads config.yaml into a frozen TokenConfig. Unquoted all-digit addresses
(e.g. the system program 1111...) come out of YAML as ints and are
accepted as strings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from balance_report.errors import ConfigFileError, ConfigParseError
from balance_report.utils.logger import get_logger, parse_level

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class TokenInfo:
    """Token mint to report on, shown under its ticker."""
    address: str
    ticker: str


@dataclass(frozen=True)
class TokenConfig:
    wallets: tuple[str, ...]
    tokens: tuple[TokenInfo, ...]
    solana_rpc_url: str = DEFAULT_RPC_URL
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = field(default=None)


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigParseError(f"{what} must be a non-empty string, got {value!r}")
    return value.strip()


def _require_scalar_str(value: Any, what: str) -> str:
    """Accept a string or an int scalar (YAML reads bare digits as int)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _require_str(value, what)


def _parse_tokens(raw: Any) -> tuple[TokenInfo, ...]:
    if not isinstance(raw, list):
        raise ConfigParseError("'tokens' must be a list of {address, ticker} entries")
    tokens = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ConfigParseError(f"tokens[{i}] must be a mapping, got {type(entry).__name__}")
        for key in ("address", "ticker"):
            if key not in entry:
                raise ConfigParseError(f"tokens[{i}] is missing '{key}'")
        tokens.append(TokenInfo(
            address=_require_scalar_str(entry["address"], f"tokens[{i}].address"),
            ticker=_require_scalar_str(entry["ticker"], f"tokens[{i}].ticker"),
        ))
    return tuple(tokens)


def _parse_wallets(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise ConfigParseError("'wallets' must be a list of addresses")
    return tuple(_require_scalar_str(w, f"wallets[{i}]") for i, w in enumerate(raw))


def parse_config(data: Any) -> TokenConfig:
    """Build a TokenConfig from an already-loaded YAML document."""
    if not isinstance(data, dict):
        raise ConfigParseError("Config must be a YAML mapping")

    for key in ("wallets", "tokens"):
        if key not in data:
            raise ConfigParseError(f"Missing required key '{key}'")

    rpc_url = data.get("solana_rpc_url")
    rpc_url = DEFAULT_RPC_URL if rpc_url is None else _require_str(rpc_url, "solana_rpc_url")

    log_level = data.get("log_level")
    log_level = DEFAULT_LOG_LEVEL if log_level is None else _require_str(log_level, "log_level")
    try:
        parse_level(log_level)
    except ValueError as e:
        raise ConfigParseError(str(e)) from e

    log_file = data.get("log_file")
    if log_file is not None:
        log_file = _require_str(log_file, "log_file")

    return TokenConfig(
        wallets=_parse_wallets(data["wallets"]),
        tokens=_parse_tokens(data["tokens"]),
        solana_rpc_url=rpc_url,
        log_level=log_level,
        log_file=log_file,
    )


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> TokenConfig:
    """Read and validate the config file.

    Raises:
        ConfigFileError: file is missing or unreadable
        ConfigParseError: invalid YAML or schema
    """
    config_path = Path(path)

    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(f"Cannot read config {config_path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML in {config_path}: {e}") from e

    cfg = parse_config(data)
    logger.info(
        f"Loaded {config_path}: {len(cfg.wallets)} wallets, "
        f"{len(cfg.tokens)} tokens"
    )
    return cfg
