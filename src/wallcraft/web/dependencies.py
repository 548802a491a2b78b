"""FastAPI dependency injection for wallcraft services."""

from typing import Annotated, Any

from fastapi import Depends

from wallcraft.application.config import config_to_settings, load_config_from_dict
from wallcraft.application.templates import TemplateCatalog
from wallcraft.domain import DEFAULT_SETTINGS, PlacementSettings
from wallcraft.infrastructure import (
    DEFAULT_STORE_PATH,
    JsonDesignCodec,
    JsonDesignStorage,
    PillowTextureProcessor,
)


def get_design_storage() -> JsonDesignStorage:
    """Dependency for the design store."""
    return JsonDesignStorage(DEFAULT_STORE_PATH)


def get_design_codec() -> JsonDesignCodec:
    """Dependency for the design file codec."""
    return JsonDesignCodec()


def get_texture_processor() -> PillowTextureProcessor:
    """Dependency for the texture processor."""
    return PillowTextureProcessor()


def get_template_catalog() -> TemplateCatalog:
    """Dependency for the bundled template catalog."""
    return TemplateCatalog()


def settings_from_request(config: dict[str, Any] | None) -> PlacementSettings:
    """Placement settings from an embedded configuration, or the defaults.

    Raises:
        ConfigError: If the configuration is invalid (handled by exception handler).
    """
    if config is None:
        return DEFAULT_SETTINGS
    return config_to_settings(load_config_from_dict(config))


# Type aliases for cleaner endpoint signatures
DesignStorageDep = Annotated[JsonDesignStorage, Depends(get_design_storage)]
DesignCodecDep = Annotated[JsonDesignCodec, Depends(get_design_codec)]
TextureProcessorDep = Annotated[PillowTextureProcessor, Depends(get_texture_processor)]
TemplateCatalogDep = Annotated[TemplateCatalog, Depends(get_template_catalog)]
