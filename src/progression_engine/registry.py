"""Strategy registry with auto-discovery of ProgressionStrategy subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from pathlib import Path

from progression_engine.exceptions import UnknownModelTypeError
from progression_engine.models.enums import FALLBACK_MODEL_TYPE, ModelType
from progression_engine.strategies.base import ProgressionStrategy

logger = logging.getLogger(__name__)


def parse_model_type(name: str | ModelType, strict: bool = False) -> ModelType:
    """Resolve a model name to a ModelType by exact, case-sensitive match.

    Args:
        name: Model name as sent by the caller, or a ModelType.
        strict: Raise instead of falling back for unknown names.

    Returns:
        The matching ModelType, or LINEAR for unknown names when not strict.

    Raises:
        UnknownModelTypeError: If *strict* and the name is not recognised.
    """
    try:
        return ModelType(name)
    except ValueError:
        if strict:
            raise UnknownModelTypeError(str(name)) from None
        logger.debug(
            "Unknown model type %r, falling back to %s", name, FALLBACK_MODEL_TYPE.value
        )
        return FALLBACK_MODEL_TYPE


class StrategyRegistry:
    """Discovers and manages all ProgressionStrategy implementations.

    Auto-discovers strategies by scanning the strategies/ package for any
    concrete subclasses of ProgressionStrategy. A new model is added by
    placing a module there and a member on ModelType.
    """

    def __init__(self) -> None:
        self._strategies: dict[ModelType, ProgressionStrategy] = {}

    def discover_strategies(self) -> None:
        """Scan the strategies package and register every concrete strategy."""
        import progression_engine.strategies as strategies_pkg

        strategies_path = Path(strategies_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(strategies_pkg.__name__, str(strategies_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        """Import all modules under a package and register strategies."""
        for _, module_name, _ in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.warning("Skipping strategy module %s", module_name, exc_info=True)
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, ProgressionStrategy)
                    and attr is not ProgressionStrategy
                    and not getattr(attr, "__abstractmethods__", set())
                    and attr.model_type not in self._strategies
                ):
                    self.register(attr())

    def register(self, strategy: ProgressionStrategy) -> None:
        """Register a strategy instance under its model_type."""
        self._strategies[strategy.model_type] = strategy

    def get(self, model_type: str | ModelType) -> ProgressionStrategy | None:
        """Retrieve a strategy by model name, or None if not registered."""
        try:
            return self._strategies.get(ModelType(model_type))
        except ValueError:
            return None

    def get_strict(self, model_type: str | ModelType) -> ProgressionStrategy:
        """Retrieve a strategy, raising for unknown or unregistered names.

        Raises:
            UnknownModelTypeError: If no strategy serves *model_type*.
        """
        strategy = self.get(model_type)
        if strategy is None:
            raise UnknownModelTypeError(str(model_type))
        return strategy

    def resolve(self, model_type: str | ModelType) -> ProgressionStrategy:
        """Retrieve a strategy, falling back to linear for unknown names."""
        strategy = self._strategies.get(parse_model_type(model_type))
        if strategy is None:
            strategy = self.get_strict(FALLBACK_MODEL_TYPE)
        return strategy

    def get_all_strategies(self) -> list[ProgressionStrategy]:
        """Return all registered strategies in ModelType declaration order."""
        order = list(ModelType)
        return sorted(self._strategies.values(), key=lambda s: order.index(s.model_type))

    @property
    def model_types(self) -> list[ModelType]:
        """List all registered model types."""
        return list(self._strategies.keys())
