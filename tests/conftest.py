import pytest

from pageopts.adapters.defaults.static import StaticDefaults
from pageopts.adapters.extraction.meta_tags import MetaTagExtractor
from pageopts.options_builder import OptionsBuilder


class RecordingExtractor:
    """MetaTagExtractor wrapper that remembers what it was asked to scan."""

    def __init__(self, prefix: str = "grover-"):
        self.prefix = prefix
        self.calls: list[str] = []
        self._inner = MetaTagExtractor(prefix=prefix)

    def extract(self, markup):
        self.calls.append(markup)
        return self._inner.extract(markup)


@pytest.fixture
def global_config() -> dict:
    return {"cache": False, "quality": 95}


@pytest.fixture
def extractor() -> RecordingExtractor:
    return RecordingExtractor()


@pytest.fixture
def builder(global_config, extractor) -> OptionsBuilder:
    return OptionsBuilder(defaults=StaticDefaults(global_config), extractor=extractor)
