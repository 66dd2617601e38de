from __future__ import annotations

from typing import Final

# Meta tags whose name starts with this prefix carry option overrides
DEFAULT_META_PREFIX: Final[str] = "grover-"

# Metadata keys whose first dash-separated segment names a nested option group.
# Everything else stays flat.
NESTED_OPTION_GROUPS: Final[frozenset[str]] = frozenset({"viewport"})

KEY_DELIMITER: Final[str] = "-"
LEAF_DELIMITER: Final[str] = "_"

# Layer names, lowest precedence first
LAYER_DEFAULTS: Final[str] = "defaults"
LAYER_CALL_SITE: Final[str] = "call_site"
LAYER_DOCUMENT_METADATA: Final[str] = "document_metadata"
LAYER_ORDER: Final[tuple[str, ...]] = (LAYER_DEFAULTS, LAYER_CALL_SITE, LAYER_DOCUMENT_METADATA)

# Environment variables read by settings_from_env()
ENV_SETTINGS_PATH: Final[str] = "PAGEOPTS_SETTINGS"
ENV_META_PREFIX: Final[str] = "PAGEOPTS_META_PREFIX"
