from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

DEFAULT_TWOFISHES_HOST = 'localhost'
DEFAULT_TWOFISHES_PORT = 8080
DEFAULT_TWOFISHES_TIMEOUT = 10
DEFAULT_TWOFISHES_RETRIES = 2
DEFAULT_DISTANCE_THRESHOLD_KMS = 100
DEFAULT_MAX_INTERPRETATIONS = 5
DEFAULT_CLOSE_MATCH_PATTERNS = [r'^http://id\.loc\.gov/.*']
DEFAULT_GEONAMES_BASE_URI = 'http://sws.geonames.org'
DEFAULT_GEONAMES_SOURCE = 'geonameid'

@dataclass
class GeocodeConfig:
    """
    Configuration for coarse geocode enrichment.

    Attributes:
        twofishes_host: Hostname of the Twofishes server.
        twofishes_port: Port of the Twofishes geocode endpoint.
        twofishes_timeout: Request timeout in seconds.
        twofishes_retries: Additional attempts after a failed request.
        distance_threshold: Maximum distance in kilometres between a place's
            existing coordinate and a candidate's center before the candidate
            is rejected.
        max_interpretations: Number of candidates requested per place.
        close_match_patterns: Regular expressions selecting feature URLs
            kept as closeMatch.
        geonames_base_uri: Base URI for exactMatch GeoNames URIs.
        geonames_source: Feature id source treated as a GeoNames id.
    """
    twofishes_host: str = DEFAULT_TWOFISHES_HOST
    twofishes_port: int = DEFAULT_TWOFISHES_PORT
    twofishes_timeout: float = DEFAULT_TWOFISHES_TIMEOUT
    twofishes_retries: int = DEFAULT_TWOFISHES_RETRIES
    distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD_KMS
    max_interpretations: int = DEFAULT_MAX_INTERPRETATIONS
    close_match_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_CLOSE_MATCH_PATTERNS))
    geonames_base_uri: str = DEFAULT_GEONAMES_BASE_URI
    geonames_source: str = DEFAULT_GEONAMES_SOURCE

    def __post_init__(self):
        if self.max_interpretations < 1:
            raise ValueError(f"max_interpretations must be at least 1, got {self.max_interpretations}")
        if self.distance_threshold < 0:
            raise ValueError(f"distance_threshold must not be negative, got {self.distance_threshold}")
        if self.twofishes_retries < 0:
            raise ValueError(f"twofishes_retries must not be negative, got {self.twofishes_retries}")

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> GeocodeConfig:
        """
        Create configuration from a dictionary. Missing keys take their
        defaults; unknown keys are ignored.

        Args:
            config_dict (Dict[str, Any]): Dictionary with configuration values.

        Returns:
            GeocodeConfig: Configuration instance.
        """
        config_dict = config_dict or {}
        known = {f.name for f in fields(cls)}
        unknown = [key for key in config_dict if key not in known]
        if unknown:
            logger.warning(f"Ignoring unknown geocode configuration keys: {unknown}")
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    @classmethod
    def from_yaml(cls, yaml_path: Optional[Path] = None) -> GeocodeConfig:
        """
        Load configuration from a YAML file.

        Args:
            yaml_path: Path to YAML config file. If None, uses the packaged config.yaml.

        Returns:
            GeocodeConfig: Configuration instance loaded from YAML.
        """
        yaml_path = Path(yaml_path) if yaml_path else DEFAULT_CONFIG_PATH
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Expected a mapping in {yaml_path}, got {type(config_dict).__name__}")
        logger.info(f"Loaded geocode config from {yaml_path}")
        return cls.from_dict(config_dict)
