from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from folksonomy.config import defaults
from folksonomy.errors import InvalidConfigurationError
from folksonomy.models import ColourCorrelation, OrderingType, Scaling


def _normalize_choice(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


class RenderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    top_n_items: int = defaults.DEFAULT_TOP_N_ITEMS
    control_id: str = ""


class IndexConfig(RenderConfig):
    order: OrderingType = OrderingType.NONE
    control_id: str = defaults.DEFAULT_INDEX_ID

    @field_validator("order", mode="before")
    @classmethod
    def normalize_order(cls, v):
        return _normalize_choice(v)


class CloudConfig(RenderConfig):
    order: OrderingType = OrderingType.NONE
    scaling: Scaling = Scaling.LINEAR
    gradations: int = defaults.DEFAULT_GRADATIONS
    control_id: str = defaults.DEFAULT_CLOUD_ID

    @field_validator("order", "scaling", mode="before")
    @classmethod
    def normalize_choices(cls, v):
        return _normalize_choice(v)

    @field_validator("gradations")
    @classmethod
    def check_gradations(cls, v):
        if v < 2:
            raise ValueError(f"gradations must be at least 2, got {v}")
        return v


class HeatMapConfig(RenderConfig):
    colour_correlation: ColourCorrelation = ColourCorrelation.INDEX
    show_count: bool = True
    saturation: float = Field(defaults.DEFAULT_SATURATION, ge=0.0, le=1.0)
    luminance: float = Field(defaults.DEFAULT_LUMINANCE, ge=0.0, le=1.0)
    taper_width: bool = True
    min_width_percentage: int = Field(defaults.DEFAULT_MIN_WIDTH_PERCENTAGE, ge=0, le=100)
    control_id: str = defaults.DEFAULT_HEAT_MAP_ID

    @field_validator("colour_correlation", mode="before")
    @classmethod
    def normalize_correlation(cls, v):
        return _normalize_choice(v)


ConfigT = TypeVar("ConfigT", bound=RenderConfig)


def build_config(
    config_cls: Type[ConfigT],
    config: Optional[ConfigT] = None,
    options: Optional[Dict[str, Any]] = None
) -> ConfigT:
    """
    Resolve the effective config for one render call.

    Keyword options override the fields of ``config`` (or the model defaults).
    Validation failures surface as InvalidConfigurationError.
    """
    base: Dict[str, Any] = config.model_dump() if config is not None else {}
    base.update(options or {})
    try:
        return config_cls(**base)
    except ValidationError as ex:
        raise InvalidConfigurationError(
            f"[{config_cls.__name__}] Invalid options: {ex}"
        ) from ex
