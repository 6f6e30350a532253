"""
Configuration Loader - Load and validate configuration from YAML.

Supports hierarchical configuration:
- config/default.yaml - Global settings
- config/games/{game_id}.yaml - Per-game settings

Game-specific settings override defaults.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field
from copy import deepcopy

from rich.console import Console

from ..games.snake.config import SnakeConfig


console = Console()


@dataclass
class DisplayConfig:
    """Terminal display settings."""
    fps: int = 30

    def __post_init__(self):
        if self.fps < 1:
            raise ValueError(f"fps must be >= 1, got {self.fps}")


@dataclass
class Config:
    """Complete application configuration."""
    game: SnakeConfig = field(default_factory=SnakeConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _build_config(data: Dict) -> Config:
    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], SnakeConfig)

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a single YAML file.

    Args:
        config_path: Path to config file

    Returns:
        Config object with all settings
    """
    if config_path is None or not Path(config_path).exists():
        console.print(f"[Config] Config file not found: {config_path}, using defaults", markup=False)
        return Config()

    return _build_config(_load_yaml_file(Path(config_path)))


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_dir() -> Path:
    """Find the config directory."""
    possible_paths = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
        Path.cwd() / "config",
    ]

    for path in possible_paths:
        if path.exists() and path.is_dir():
            return path

    # Fallback to project root config folder
    return Path(__file__).parent.parent.parent / "config"


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def load_game_config(game_id: str = "snake", config_dir: Optional[Path] = None) -> Config:
    """
    Load configuration for a specific game.

    Merges default settings with game-specific settings.
    Game settings override defaults.

    Args:
        game_id: The game identifier (e.g., "snake")
        config_dir: Directory holding default.yaml and games/ (searched for if omitted)

    Returns:
        Config object with merged settings
    """
    if config_dir is None:
        config_dir = _find_config_dir()

    default_data = _load_yaml_file(config_dir / "default.yaml")
    game_data = _load_yaml_file(config_dir / "games" / f"{game_id}.yaml")

    merged_data = _deep_merge(default_data, game_data)

    if not merged_data:
        console.print(f"[Config] No config found for game '{game_id}', using defaults", markup=False)
        return Config()

    return _build_config(merged_data)

