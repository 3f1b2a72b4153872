"""
YAML run-config loader with schema validation.

Loads universe dimensions, seed mode, pattern placements and driver
settings from a YAML file and validates against a JSON schema.
"""

import yaml
import json
from pathlib import Path
from typing import Optional
import jsonschema

from .data_types import PatternPlacement, UniverseConfig, RunSettings, RunConfig
from .constants import SEED_EMPTY, SEED_MODES
from .universe import Universe
from .patterns import PATTERNS, place_pattern


# Schemas shipped with the package
SCHEMA_DIR = Path(__file__).parent / "schemas"


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")

    if not isinstance(data, dict):
        raise DataLoadError(f"Expected a mapping at top level of {file_path}")
    return data


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation optional when pointed at a directory without one
        return

    try:
        with open(schema_path, 'r', encoding='utf-8') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def parse_run_config(data: dict, source: str = "<dict>") -> RunConfig:
    """
    Parse an already validated dict into a RunConfig.

    Pattern names and seed modes are checked here as well, so dicts that
    never went through the schema still fail with DataLoadError.
    """
    universe_data = dict(data.get('universe', {}))
    pattern_data = universe_data.pop('patterns', [])

    patterns = []
    for p in pattern_data:
        if p.get('name') not in PATTERNS:
            raise DataLoadError(f"Unknown pattern '{p.get('name')}' in {source}")
        patterns.append(PatternPlacement(**p))

    universe = UniverseConfig(**universe_data, patterns=patterns)
    if universe.seed not in SEED_MODES:
        raise DataLoadError(f"Unknown seed mode '{universe.seed}' in {source}")

    simulation = RunSettings(**(data.get('simulation') or {}))
    if simulation.summary_interval < 1:
        raise DataLoadError(f"summary_interval must be at least 1 in {source}, got {simulation.summary_interval}")
    if simulation.steps is not None and simulation.steps < 0:
        raise DataLoadError(f"steps must be non-negative in {source}, got {simulation.steps}")
    if simulation.frame_delay_seconds < 0:
        raise DataLoadError(f"frame_delay_seconds must be non-negative in {source}, got {simulation.frame_delay_seconds}")

    return RunConfig(
        universe=universe,
        simulation=simulation,
        description=data.get('description')
    )


def load_run_config(file_path: Path, schema_dir: Optional[Path] = SCHEMA_DIR) -> RunConfig:
    """Load run configuration from YAML"""
    file_path = Path(file_path)
    data = load_yaml(file_path)

    # Validate if schema available
    if schema_dir:
        schema_path = Path(schema_dir) / "run.schema.json"
        validate_against_schema(data, schema_path, file_path)

    try:
        return parse_run_config(data, str(file_path))
    except TypeError as e:
        # Unexpected keys reach the dataclass constructors when validation is skipped
        raise DataLoadError(f"Invalid run config {file_path}: {e}")


def build_universe(config: UniverseConfig) -> Universe:
    """
    Create the universe described by a UniverseConfig.

    Seeds with the default pattern or leaves the grid empty, then stamps
    each configured pattern in order.
    """
    if config.seed not in SEED_MODES:
        raise DataLoadError(f"Unknown seed mode '{config.seed}'")

    try:
        if config.seed == SEED_EMPTY:
            universe = Universe.empty(config.width, config.height)
        else:
            universe = Universe(config.width, config.height)
    except (TypeError, ValueError, OverflowError) as e:
        raise DataLoadError(f"Invalid universe size {config.width!r} x {config.height!r}: {e}")

    for placement in config.patterns:
        try:
            place_pattern(universe, placement.name, placement.row, placement.column)
        except (KeyError, ValueError) as e:
            raise DataLoadError(f"Cannot place pattern '{placement.name}': {e}")

    return universe
