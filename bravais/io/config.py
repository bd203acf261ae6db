"""
YAML configuration of lattices.

A configuration file looks like

    lattice:
      type: BODY_CENTERED_TETRAGONAL   # enum name, short code or integer
      a: 1.0
      c: 0.5
    logging:
      verbosity: 1

Parameters left out take the defaults of the lattice type.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..core.exceptions import InvalidLatticeConfiguration
from ..core.lattice import BravaisLattice, create_lattice
from ..utils.logging import setup_logging

logger = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file

    Parameters
    ----------
    path : str or Path
        Path to the YAML file

    Returns
    -------
    config : Dict[str, Any]
        Parsed configuration; an empty file gives an empty dict
    """
    with open(path, 'r') as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidLatticeConfiguration(
            f"Configuration {path} must be a mapping, got {type(config).__name__}")
    return config


def save_config(lattice: BravaisLattice, path: Union[str, Path], verbosity: int = 0) -> Path:
    """Write the configuration that rebuilds `lattice`."""
    path = Path(path)
    config = {'lattice': lattice.to_dict()}
    if verbosity:
        config['logging'] = {'verbosity': int(verbosity)}
    with open(path, 'w') as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    return path


def lattice_from_config(config: Union[str, Path, Dict[str, Any]]) -> BravaisLattice:
    """
    Build a lattice from a configuration file or dictionary.

    Parameters
    ----------
    config : str, Path or dict
        YAML file path, a full configuration with a 'lattice' section, or
        the lattice section itself (as returned by BravaisLattice.to_dict)

    Returns
    -------
    lattice : BravaisLattice

    Raises
    ------
    InvalidLatticeConfiguration
        If the type is missing or unknown, or the parameters are invalid
    """
    if isinstance(config, (str, Path)):
        logger.debug(f"Loading lattice configuration from {config}")
        config = load_config(config)

    section = dict(config.get('lattice', config))
    verbosity = config.get('logging', {}).get('verbosity', 0)
    if verbosity:
        setup_logging(verbosity)

    if 'type' not in section:
        raise InvalidLatticeConfiguration("Lattice configuration has no 'type' entry")
    lattice_type = section.pop('type')

    parameters = {}
    for name, value in section.items():
        try:
            parameters[name] = float(value)
        except (TypeError, ValueError):
            raise InvalidLatticeConfiguration(
                f"Lattice parameter {name} must be a number, got {value!r}") from None

    return create_lattice(lattice_type, **parameters)
