"""
Test run-config loading

Verifies YAML -> Python dataclass conversion, schema validation and
universe construction from a config.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from torus_life.loader import (
    load_yaml, load_run_config, parse_run_config, build_universe, DataLoadError
)
from torus_life.data_types import UniverseConfig, PatternPlacement
from torus_life.universe import Universe
from torus_life.patterns import place_pattern
from torus_life.constants import TICK_SUMMARY_INTERVAL


DATA_ROOT = Path(__file__).parent.parent.parent / "data"


def write_yaml(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "run.yaml"
    path.write_text(text, encoding='utf-8')
    return path


def test_load_shipped_glider_config():
    config = load_run_config(DATA_ROOT / "glider.yaml")

    print(f"[OK] Loaded config: {config.description}")
    assert config.universe.width == 32
    assert config.universe.height == 32
    assert config.universe.seed == "empty"
    assert [p.name for p in config.universe.patterns] == ['glider', 'glider', 'blinker']
    assert config.simulation.steps == 200
    assert config.simulation.summary_interval == 50


def test_load_shipped_default_config():
    config = load_run_config(DATA_ROOT / "default.yaml")
    assert config.simulation.steps is None
    assert build_universe(config.universe) == Universe(64, 64)


def test_minimal_config_uses_defaults(tmp_path):
    path = write_yaml(tmp_path, "universe:\n  width: 8\n  height: 4\n")
    config = load_run_config(path)

    assert config.universe.seed == "default"
    assert config.universe.patterns == []
    assert config.simulation.summary_interval == TICK_SUMMARY_INTERVAL
    assert config.simulation.render is True
    assert config.description is None


def test_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_yaml(tmp_path / "nope.yaml")


def test_bad_yaml(tmp_path):
    path = write_yaml(tmp_path, "universe: [width: 3\n")
    with pytest.raises(DataLoadError):
        load_run_config(path)


def test_schema_rejects_negative_width(tmp_path):
    path = write_yaml(tmp_path, "universe:\n  width: -3\n  height: 4\n")
    with pytest.raises(DataLoadError):
        load_run_config(path)


def test_schema_rejects_unknown_seed(tmp_path):
    path = write_yaml(tmp_path, "universe:\n  width: 3\n  height: 4\n  seed: random\n")
    with pytest.raises(DataLoadError):
        load_run_config(path)


def test_schema_rejects_unknown_key(tmp_path):
    path = write_yaml(tmp_path, "universe:\n  width: 3\n  height: 4\n  rule: B36/S23\n")
    with pytest.raises(DataLoadError):
        load_run_config(path)


def test_unknown_key_without_schema(tmp_path):
    path = write_yaml(tmp_path, "universe:\n  width: 3\n  height: 4\n  rule: B36/S23\n")
    with pytest.raises(DataLoadError):
        load_run_config(path, schema_dir=None)


def test_unknown_pattern_name(tmp_path):
    path = write_yaml(tmp_path, (
        "universe:\n"
        "  width: 8\n"
        "  height: 8\n"
        "  patterns:\n"
        "    - name: pulsar\n"
    ))
    with pytest.raises(DataLoadError):
        load_run_config(path)


def test_parse_run_config_from_dict():
    config = parse_run_config({
        'universe': {'width': 5, 'height': 5, 'seed': 'empty',
                     'patterns': [{'name': 'blinker', 'row': 2, 'column': 1}]},
        'simulation': {'steps': 3, 'render': False},
    })
    assert config.universe.patterns == [PatternPlacement(name='blinker', row=2, column=1)]
    assert config.simulation.steps == 3
    assert config.simulation.render is False


def test_build_universe_stamps_patterns():
    config = UniverseConfig(
        width=32, height=32, seed="empty",
        patterns=[PatternPlacement('glider', 1, 1), PatternPlacement('blinker', 10, 24)]
    )
    u = build_universe(config)

    expected = Universe.empty(32, 32)
    place_pattern(expected, 'glider', 1, 1)
    place_pattern(expected, 'blinker', 10, 24)

    assert u == expected
    assert u.alive_count() == 8


def test_build_universe_rejects_bad_placement():
    with pytest.raises(DataLoadError):
        build_universe(UniverseConfig(width=0, height=0, seed="empty",
                                      patterns=[PatternPlacement('block')]))
    with pytest.raises(DataLoadError):
        build_universe(UniverseConfig(width=4, height=4, seed="noise"))


def test_parse_rejects_zero_summary_interval():
    with pytest.raises(DataLoadError):
        parse_run_config({
            'universe': {'width': 4, 'height': 4},
            'simulation': {'summary_interval': 0, 'render': False},
        })


def test_parse_rejects_negative_steps_and_delay():
    with pytest.raises(DataLoadError):
        parse_run_config({'universe': {'width': 4, 'height': 4}, 'simulation': {'steps': -1}})
    with pytest.raises(DataLoadError):
        parse_run_config({'universe': {'width': 4, 'height': 4},
                          'simulation': {'frame_delay_seconds': -0.5}})


def test_build_universe_oversized_grid(tmp_path):
    # Passes the schema's per-dimension bound, fails the total cell limit
    path = write_yaml(tmp_path, "universe:\n  width: 65536\n  height: 65536\n  seed: empty\n")
    config = load_run_config(path)
    with pytest.raises(DataLoadError):
        build_universe(config.universe)
