"""
Runtime configuration for quantica.
"""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class QuanticaConfig:
    """Process-wide settings.

    :param definitions_path: Definitions file used instead of the built-in table.
    :param log_level: Level applied to the ``quantica`` logger, left untouched if unset.
    :param rel_tolerance: Relative tolerance used by :meth:`Quantity.is_close`.
    """

    definitions_path: Optional[str] = None
    log_level: Optional[str] = None
    rel_tolerance: float = 1e-9

    @classmethod
    def from_env(cls) -> "QuanticaConfig":
        """Builds a configuration from ``QUANTICA_*`` environment variables."""
        defaults = cls()
        return cls(
            definitions_path=os.environ.get("QUANTICA_DEFINITIONS") or None,
            log_level=(os.environ.get("QUANTICA_LOG_LEVEL") or "").upper() or None,
            rel_tolerance=float(
                os.environ.get("QUANTICA_REL_TOLERANCE", defaults.rel_tolerance)
            ),
        )


_config: Optional[QuanticaConfig] = None


def get_config() -> QuanticaConfig:
    global _config
    if _config is None:
        set_config(QuanticaConfig.from_env())
    return _config


def set_config(config: QuanticaConfig) -> None:
    """Installs ``config`` and drops the cached default definitions so the
    next lookup honours the new ``definitions_path``."""
    global _config
    from quantica.constructors import default_definitions
    from quantica.utils.logging import SetLoggingLevel

    _config = config
    if config.log_level:
        SetLoggingLevel(config.log_level)
    default_definitions.cache_clear()
