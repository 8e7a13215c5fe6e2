"""
Scenario loader

Reads and writes SimulationConfig scenarios as YAML. A scenario can be given
as a file path or by name, in which case it is looked up in the scenario
directory (scenarios/simulation/<name>.yaml by default).
"""

import yaml
from pathlib import Path
from typing import List, Union

from .simulation import SimulationConfig

DEFAULT_SCENARIO_DIR = Path("scenarios") / "simulation"
SCENARIO_SUFFIXES = (".yaml", ".yml")


class ConfigLoader:
    """Loads simulation scenarios from a scenario directory or explicit paths"""

    def __init__(self, scenario_dir: Union[str, Path] = DEFAULT_SCENARIO_DIR):
        self.scenario_dir = Path(scenario_dir)

    def resolve(self, scenario: Union[str, Path]) -> Path:
        """
        Turn a scenario name or path into an existing file path

        Raises:
            FileNotFoundError: If neither the path nor a named scenario exists
        """
        path = Path(scenario)
        if path.is_file():
            return path

        if path.suffix not in SCENARIO_SUFFIXES and len(path.parts) == 1:
            for suffix in SCENARIO_SUFFIXES:
                candidate = self.scenario_dir / f"{path.name}{suffix}"
                if candidate.is_file():
                    return candidate

        raise FileNotFoundError(f"Scenario not found: {scenario} (searched {self.scenario_dir})")

    def list_scenarios(self) -> List[str]:
        """Names of the scenarios in the scenario directory"""
        if not self.scenario_dir.is_dir():
            return []
        return sorted(p.stem for p in self.scenario_dir.iterdir()
                      if p.is_file() and p.suffix in SCENARIO_SUFFIXES)

    def load(self, scenario: Union[str, Path]) -> SimulationConfig:
        """
        Load and validate a scenario

        Args:
            scenario: YAML file path or scenario name

        Returns:
            SimulationConfig instance

        Raises:
            FileNotFoundError: If the scenario doesn't exist
            ValueError: If the YAML is malformed or validation fails
        """
        path = self.resolve(scenario)

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        # An empty file means all defaults
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Scenario {path} must be a mapping, got {type(data).__name__}")

        config = SimulationConfig.from_dict(data)
        config.validate()
        return config

    @staticmethod
    def save(config: SimulationConfig, file_path: Union[str, Path]) -> Path:
        """Validate and write a scenario, creating parent directories"""
        config.validate()
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        return file_path


def load_simulation_config(scenario: Union[str, Path],
                           scenario_dir: Union[str, Path] = DEFAULT_SCENARIO_DIR) -> SimulationConfig:
    """Load SimulationConfig from a YAML path or scenario name"""
    return ConfigLoader(scenario_dir).load(scenario)


def save_simulation_config(config: SimulationConfig, file_path: Union[str, Path]) -> Path:
    """Save SimulationConfig to YAML file"""
    return ConfigLoader.save(config, file_path)
