"""Platform discovery strategy interface and registry.

Strategies find Roblox Studio when no override path is configured. One
strategy is registered per platform tag (``sys.platform`` value); platforms
without a registered strategy get :class:`UnsupportedStrategy`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Mapping, Optional, Protocol, runtime_checkable

from roblox_install.core.config import LocatorSettings
from roblox_install.core.exceptions import PlatformNotSupported
from roblox_install.core.models import RobloxStudio
from roblox_install.core.registry import RegistryReader

logger = logging.getLogger(__name__)


@runtime_checkable
class DiscoveryStrategy(Protocol):
    """Protocol for platform discovery strategies."""

    platform: str

    def locate(self) -> RobloxStudio:
        """Find the installation for this platform.

        Returns:
            The resolved installation

        Raises:
            RobloxInstallError: If discovery fails
        """
        ...


class BaseDiscoveryStrategy(ABC):
    """Base class for discovery strategies."""

    platform: str = ""

    def __init__(
        self,
        settings: LocatorSettings,
        environ: Mapping[str, str],
        registry: Optional[RegistryReader] = None,
    ) -> None:
        """Initialize strategy.

        Args:
            settings: Locator settings
            environ: Environment to read user variables from
            registry: Registry reader, used only by registry-based discovery
        """
        self.settings = settings
        self.environ = environ
        self.registry = registry

    @abstractmethod
    def locate(self) -> RobloxStudio:
        ...


class UnsupportedStrategy(BaseDiscoveryStrategy):
    """Fallback for platforms Roblox Studio does not run on."""

    platform = "unsupported"

    def locate(self) -> RobloxStudio:
        raise PlatformNotSupported()


# Registry of strategies by platform tag
_STRATEGY_REGISTRY: dict[str, type[BaseDiscoveryStrategy]] = {}


def register_strategy(strategy_class: type[BaseDiscoveryStrategy]) -> None:
    """Register a discovery strategy under its platform tag.

    Args:
        strategy_class: Strategy class to register
    """
    raw_platform = getattr(strategy_class, "platform", "")
    platform = raw_platform.strip() if isinstance(raw_platform, str) else ""
    if not platform:
        raise ValueError(
            f"Cannot register strategy {strategy_class.__name__} with empty platform"
        )
    _STRATEGY_REGISTRY[platform] = strategy_class


def get_strategy_for_platform(platform: str) -> type[BaseDiscoveryStrategy]:
    """Get strategy class for a platform tag.

    Args:
        platform: Platform tag such as ``win32``, ``darwin`` or ``linux``

    Returns:
        Strategy class, or UnsupportedStrategy if none is registered
    """
    strategy = _STRATEGY_REGISTRY.get(str(platform or "").strip(), UnsupportedStrategy)
    logger.debug("Using %s for platform %r", strategy.__name__, platform)
    return strategy


def _register_builtin_strategies() -> None:
    """Register built-in discovery strategies."""
    from roblox_install.core.strategies.emulation_prefix import EmulationPrefixStrategy
    from roblox_install.core.strategies.fixed_bundle import FixedBundleStrategy
    from roblox_install.core.strategies.registry_based import RegistryStrategy

    register_strategy(RegistryStrategy)
    register_strategy(FixedBundleStrategy)
    register_strategy(EmulationPrefixStrategy)


# Auto-register on import
_register_builtin_strategies()


__all__ = [
    "DiscoveryStrategy",
    "BaseDiscoveryStrategy",
    "UnsupportedStrategy",
    "register_strategy",
    "get_strategy_for_platform",
]
