"""
Configuration management for classifierTournament.

Tournament settings as a validated dataclass, plus YAML/JSON persistence.
"""

from typing import Optional, Union
import yaml
import json
from pathlib import Path
from dataclasses import dataclass, asdict

from .logger import get_logger

DISCRETIZE_STRATEGIES = ("uniform", "quantile")


@dataclass
class Config:
    """Settings shared by the evaluator, the runner and the command line."""
    
    # Cross-validation configuration
    cv_folds: int = 10
    random_state: int = 1
    n_jobs: int = 1
    
    # Discretize transform configuration
    discretize_bins: int = 10
    discretize_strategy: str = "uniform"
    
    # Output configuration
    log_level: str = "INFO"
    output_dir: str = "./results"
    
    def __post_init__(self):
        """Validate values after dataclass creation."""
        if self.cv_folds < 2:
            raise ValueError(f"cv_folds must be at least 2, got {self.cv_folds}")
        if self.n_jobs == 0:
            raise ValueError("n_jobs must be a positive number of workers or negative for all cores")
        if self.discretize_bins < 1:
            raise ValueError(f"discretize_bins must be positive, got {self.discretize_bins}")
        if self.discretize_strategy not in DISCRETIZE_STRATEGIES:
            raise ValueError(
                f"discretize_strategy must be one of {DISCRETIZE_STRATEGIES}, "
                f"got {self.discretize_strategy!r}"
            )


class ConfigManager:
    """Holds the active Config and moves it to and from YAML or JSON files."""
    
    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger("ConfigManager")
        self.config = config if config is not None else Config()
        
    def load_from_file(self, config_path: Union[str, Path]) -> 'ConfigManager':
        """
        Merge the mapping stored in a YAML or JSON file into the configuration.
        
        Args:
            config_path: File ending in .yaml, .yml or .json
            
        Returns:
            This manager, so calls can be chained
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        
        file_format = self._format_of(config_path)
        self.logger.info(f"Reading {file_format} configuration from {config_path}")
        
        with open(config_path, 'r', encoding='utf-8') as f:
            if file_format == 'yaml':
                config_data = yaml.safe_load(f) or {}
            else:
                config_data = json.load(f)
        
        if not isinstance(config_data, dict):
            raise ValueError(f"{config_path.name} must contain a mapping of settings")
        return self.update_config(**config_data)
        
    def save_to_file(self, config_path: Union[str, Path]) -> None:
        """Write the current configuration as YAML or JSON, chosen by suffix."""
        config_path = Path(config_path)
        file_format = self._format_of(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        
        settings = asdict(self.config)
        with open(config_path, 'w', encoding='utf-8') as f:
            if file_format == 'yaml':
                yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(settings, f, indent=2)
        
        self.logger.info(f"Configuration written to {config_path}")
    
    @staticmethod
    def _format_of(config_path: Path) -> str:
        suffix = config_path.suffix.lower()
        if suffix in ('.yaml', '.yml'):
            return 'yaml'
        if suffix == '.json':
            return 'json'
        raise ValueError(f"Unsupported configuration file format: {suffix or config_path.name}")
        
    def get_config(self) -> Config:
        return self.config
        
    def update_config(self, **kwargs) -> 'ConfigManager':
        """
        Apply keyword overrides.
        
        Unknown keys are logged and ignored. The merged values are validated
        as a whole, so an invalid override leaves the current configuration
        untouched.
        """
        merged = asdict(self.config)
        for key, value in kwargs.items():
            if key not in merged:
                self.logger.warning(f"Ignoring unknown configuration key: {key}")
                continue
            merged[key] = value
        
        self.config = Config(**merged)
        return self
