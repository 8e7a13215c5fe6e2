"""
Configuration tests
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from config import (
    BuildingConfig,
    ElevatorConfig,
    MaintenanceConfig,
    SimulationConfig,
    TrafficConfig,
    ConfigLoader,
    load_simulation_config,
    save_simulation_config,
)


def test_load_default_scenario():
    config = load_simulation_config(project_root / "scenarios" / "simulation" / "default.yaml")
    assert config.building.num_floors == 8
    assert config.elevator.num_elevators == 2
    assert config.get_initial_floors() == [0, 4]
    assert config.maintenance == [MaintenanceConfig(elevator=2, at=200.0)]
    assert config.tick_interval == 1.0
    assert config.random_seed == 42


def test_save_and_load(tmp_path):
    config = SimulationConfig(
        building=BuildingConfig(num_floors=5, lobby_floor=1),
        elevator=ElevatorConfig(num_elevators=3),
        traffic=TrafficConfig(simulation_duration=60.0, passenger_generation_rate=0.2),
        maintenance=[MaintenanceConfig(elevator=3, at=30.0)],
        random_seed=7,
    )
    path = tmp_path / "nested" / "scenario.yaml"
    save_simulation_config(config, path)

    loaded = load_simulation_config(path)
    assert loaded == config
    assert loaded.get_initial_floors() == [1, 1, 1]


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_simulation_config("does/not/exist.yaml")


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    config = load_simulation_config(path)
    assert config == SimulationConfig()


def test_load_scenario_by_name():
    scenario_dir = project_root / "scenarios" / "simulation"
    loader = ConfigLoader(scenario_dir)
    assert "default" in loader.list_scenarios()
    assert loader.resolve("default") == scenario_dir / "default.yaml"
    assert load_simulation_config("default", scenario_dir=scenario_dir).random_seed == 42

    with pytest.raises(FileNotFoundError):
        loader.resolve("no_such_scenario")


def test_list_scenarios(tmp_path):
    assert ConfigLoader(tmp_path / "missing").list_scenarios() == []

    (tmp_path / "rush.yml").write_text("", encoding="utf-8")
    (tmp_path / "quiet.yaml").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    loader = ConfigLoader(tmp_path)
    assert loader.list_scenarios() == ["quiet", "rush"]
    assert loader.load("rush") == SimulationConfig()


def test_malformed_scenarios(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("simulation: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_simulation_config(broken)

    listing = tmp_path / "listing.yaml"
    listing.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_simulation_config(listing)


def test_save_rejects_invalid_config(tmp_path):
    config = SimulationConfig(maintenance=[MaintenanceConfig(elevator=2, at=1.0)])
    with pytest.raises(ValueError):
        save_simulation_config(config, tmp_path / "invalid.yaml")
    assert not (tmp_path / "invalid.yaml").exists()


def test_field_validation():
    with pytest.raises(ValueError):
        BuildingConfig(num_floors=0)
    with pytest.raises(ValueError):
        BuildingConfig(num_floors=4, lobby_floor=4)
    with pytest.raises(ValueError):
        ElevatorConfig(num_elevators=2, initial_floors=[0])
    with pytest.raises(ValueError):
        TrafficConfig(simulation_duration=0)
    with pytest.raises(ValueError):
        TrafficConfig(od_matrix=[[0.0, 1.0], [1.0]])
    with pytest.raises(ValueError):
        MaintenanceConfig(elevator=0, at=10.0)
    with pytest.raises(ValueError):
        SimulationConfig(tick_interval=0)


def test_cross_validation():
    config = SimulationConfig(elevator=ElevatorConfig(num_elevators=1, initial_floors=[9]))
    with pytest.raises(ValueError):
        config.validate()

    config = SimulationConfig(maintenance=[MaintenanceConfig(elevator=2, at=1.0)])
    with pytest.raises(ValueError):
        config.validate()

    config = SimulationConfig(traffic=TrafficConfig(poll_interval=2.0), tick_interval=1.0)
    with pytest.raises(ValueError):
        config.validate()

    config = SimulationConfig(traffic=TrafficConfig(od_matrix=[[0.0, 1.0], [1.0, 0.0]]))
    with pytest.raises(ValueError):
        config.validate()

    SimulationConfig().validate()
