from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pageopts.adapters.extraction.meta_tags import MetaTagExtractor
from pageopts.adapters.sources.text_loader import TextLoader
from pageopts.options_builder import OptionsBuilder
from pageopts.ports import DefaultsProvider, MetadataExtractor
from pageopts.settings import Settings, load_settings, settings_from_env


@dataclass(frozen=True, slots=True)
class Container:
    """
    Lightweight dependency container.
    Holds the settings and the adapters wired into the options builder.
    """
    settings: Settings
    defaults: DefaultsProvider
    extractor: MetadataExtractor
    builder: OptionsBuilder
    text_loader: TextLoader


def build_container(
    settings_path: Optional[str | Path] = None,
    *,
    meta_prefix: Optional[str] = None,
) -> Container:
    if settings_path is not None:
        settings = load_settings(settings_path, meta_prefix=meta_prefix)
    else:
        settings = settings_from_env()
        if meta_prefix is not None:
            settings = Settings(defaults=settings.defaults, meta_prefix=meta_prefix)

    defaults = settings.defaults_provider()
    extractor = MetaTagExtractor(prefix=settings.meta_prefix)
    return Container(
        settings=settings,
        defaults=defaults,
        extractor=extractor,
        builder=OptionsBuilder(defaults=defaults, extractor=extractor),
        text_loader=TextLoader(),
    )
