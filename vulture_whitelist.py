"""Vulture whitelist — false positives that are actually used by frameworks."""

# ---------------------------------------------------------------------------
# Public API (used by consumers, not internally)
# ---------------------------------------------------------------------------
from socialgate.core.document import ProfileDocument
from socialgate.core.schemas import Identity
from socialgate.events import HookRegistry

HookRegistry.on
Identity.native_id
ProfileDocument.to_dict

# ---------------------------------------------------------------------------
# FastAPI route handlers (registered via decorators, not called directly)
# ---------------------------------------------------------------------------
_.oauth_authorize
_.oauth_callback

# ---------------------------------------------------------------------------
# Pydantic / dataclass fields (used for serialization, not accessed in code)
# ---------------------------------------------------------------------------
_.model_config
_.timestamp
_._check_urn
