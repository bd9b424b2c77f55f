import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from folksonomy.config.render_config import CloudConfig, HeatMapConfig, IndexConfig, build_config
from folksonomy.errors import InvalidConfigurationError
from folksonomy.utils.logger import get_logger

logger = get_logger()


@dataclass
class RenderProfile:
    index: IndexConfig = field(default_factory=IndexConfig)
    cloud: CloudConfig = field(default_factory=CloudConfig)
    heat_map: HeatMapConfig = field(default_factory=HeatMapConfig)


def validate_section(section_name: str, section: Any) -> Dict[str, Any]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(
            f"[ProfileLoader] '{section_name}' must be a dict, got {type(section).__name__}"
        )

    normalized = {}
    for key, value in section.items():
        if not isinstance(key, str):
            raise InvalidConfigurationError(f"[ProfileLoader] Invalid key in '{section_name}': {key} (must be str)")
        normalized[key.strip().lower()] = value

    return normalized


def parse_render_profile(config: Any) -> RenderProfile:
    if config is None:
        return RenderProfile()
    if not isinstance(config, dict):
        raise InvalidConfigurationError("[ProfileLoader] YAML root must be a dictionary")

    unknown = set(config) - {"index", "cloud", "heat_map"}
    if unknown:
        raise InvalidConfigurationError(f"[ProfileLoader] Unknown sections: {sorted(unknown)}")

    return RenderProfile(
        index=build_config(IndexConfig, options=validate_section("index", config.get("index"))),
        cloud=build_config(CloudConfig, options=validate_section("cloud", config.get("cloud"))),
        heat_map=build_config(HeatMapConfig, options=validate_section("heat_map", config.get("heat_map"))),
    )


def load_render_profile(path: Path) -> RenderProfile:
    """
    Load per-widget render options from a YAML file.

    Expected layout (every section and key optional)::

        index:
          order: alphabetic
        cloud:
          scaling: logarithmic
          gradations: 6
        heat_map:
          colour_correlation: count
          min_width_percentage: 40
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        profile = parse_render_profile(config)
        logger.info(f"[ProfileLoader] Render profile loaded from {path}")
        return profile

    except (OSError, yaml.YAMLError) as ex:
        logger.error(f"[ProfileLoader] Failed to read render profile {path}: {ex}")
        raise InvalidConfigurationError(f"[ProfileLoader] Cannot read {path}: {ex}") from ex
    except InvalidConfigurationError as ex:
        logger.error(f"[ProfileLoader] Failed to validate render profile: {ex}")
        raise
