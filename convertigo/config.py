from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from convertigo.errors import ConfigError
from convertigo.models import SupportedCurrency, normalize_code


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "data" / "converter.yaml"
DEFAULT_BASE_URL = "https://api.exchangerate-api.com/v4/latest"


@dataclass
class ConverterConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: Optional[float] = None
    supported_currencies: List[SupportedCurrency] = field(default_factory=list)


def _load_yaml(path: Path) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at top level")
    return raw


def load_supported_currencies(entries) -> List[SupportedCurrency]:
    """Build the display list from `supported_currencies` entries.

    Entries are either `{code, label}` mappings or bare code strings.
    """
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ConfigError("'supported_currencies' must be a list")

    currencies: List[SupportedCurrency] = []
    for entry in entries:
        if isinstance(entry, str):
            code = entry
            label = entry
        elif isinstance(entry, dict) and entry.get("code"):
            code = str(entry["code"])
            label = str(entry.get("label") or code)
        else:
            raise ConfigError(f"Invalid supported_currencies entry: {entry!r}")

        currencies.append(SupportedCurrency(code=normalize_code(code), label=label))
    return currencies


def load_config(path: Optional[Path] = None) -> ConverterConfig:
    if path is None:
        path = DEFAULT_CONFIG_PATH
    raw = _load_yaml(Path(path))

    api_cfg = raw.get("api", {}) or {}
    if not isinstance(api_cfg, dict):
        raise ConfigError("'api' section must be a mapping")

    timeout = api_cfg.get("timeout_seconds", None)
    if timeout is not None:
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigError("'api.timeout_seconds' must be a number") from exc

    return ConverterConfig(
        base_url=str(api_cfg.get("base_url") or DEFAULT_BASE_URL),
        timeout_seconds=timeout,
        supported_currencies=load_supported_currencies(raw.get("supported_currencies")),
    )
