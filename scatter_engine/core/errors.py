# ========================
# file: scatter_engine/core/errors.py
# ========================
class ScatterError(Exception):
    """Base error for the scatter engine."""


class ConfigurationError(ScatterError, ValueError):
    """Raised when sampler input is malformed (empty diameters, bad region...)."""


class PresetError(ScatterError):
    """Base error for preset system."""


class ValidationError(PresetError, ConfigurationError):
    """Raised when a preset fails validation."""


class NotFoundError(PresetError):
    """Raised when a preset id or path cannot be resolved."""
