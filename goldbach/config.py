"""
Run configuration.

A RunConfig is built once at the command-line boundary (YAML defaults,
then flag overrides) and passed down explicitly.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .sieves import SieveAlgorithm


@dataclass(frozen=True)
class RunConfig:
    n: Optional[int] = None
    algorithm: SieveAlgorithm = SieveAlgorithm.ATKIN
    stop_on_failure: bool = False
    primes_file: Optional[Path] = None
    output_dir: Path = Path('data/results')
    verbose: bool = False

    def with_overrides(self, **overrides) -> 'RunConfig':
        """Return a copy with every non-None override applied."""
        return replace(self, **config_from_dict(
            {k: v for k, v in overrides.items() if v is not None}
        ))


def config_from_dict(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and coerce a mapping of config keys to RunConfig field values.

    Raises ValueError on unknown keys or values of the wrong kind.
    """
    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    values = {}
    for key, value in raw.items():
        if key == 'n':
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"n must be an integer, got {value!r}")
            values[key] = value
        elif key == 'algorithm':
            values[key] = (value if isinstance(value, SieveAlgorithm)
                           else SieveAlgorithm.parse(value))
        elif key in ('stop_on_failure', 'verbose'):
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be true or false, got {value!r}")
            values[key] = value
        elif key == 'primes_file':
            values[key] = None if value is None else Path(value)
        elif key == 'output_dir':
            values[key] = Path(value)
    return values


def load_config(path=None) -> RunConfig:
    """
    Load a RunConfig from a YAML file.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. If None, built-in defaults are returned.

    Returns
    -------
    RunConfig
    """
    if path is None:
        return RunConfig()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return RunConfig(**config_from_dict(raw))
