"""Immutable feature registry for clean dependency injection."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple

from platformkit.core.interfaces import FeatureFactory
from platformkit.core.interfaces import MicroFeature


class MissingDependencies(LookupError):
    """Raised when the shell has no dependency bundle for a registered feature."""

    def __init__(self, feature_id: str):
        self.feature_id = feature_id
        super().__init__(f"No dependency bundle supplied for feature '{feature_id}'")


@dataclass(frozen=True)
class FeatureRegistry:
    """
    Ordered, immutable set of feature factories.

    Built once at startup by the shell. The declared order is the tab order.
    """

    _factories: MappingProxyType
    _order: Tuple[str, ...]

    @classmethod
    def build(cls, factories: List[FeatureFactory]) -> "FeatureRegistry":
        """
        Build registry from factories in display order.

        Raises:
            ValueError: If two factories claim the same feature id
        """
        by_id: Dict[str, FeatureFactory] = {}
        for factory in factories:
            if factory.feature_id in by_id:
                raise ValueError(
                    f"Duplicate feature id '{factory.feature_id}' found. "
                    f"Existing: {type(by_id[factory.feature_id]).__name__}, "
                    f"New: {type(factory).__name__}"
                )
            by_id[factory.feature_id] = factory

        return cls(_factories=MappingProxyType(by_id), _order=tuple(by_id.keys()))

    def get(self, feature_id: str) -> Optional[FeatureFactory]:
        return self._factories.get(feature_id)

    def list_ids(self) -> List[str]:
        return list(self._order)

    def __iter__(self):
        return (self._factories[feature_id] for feature_id in self._order)

    def __len__(self) -> int:
        return len(self._order)

    def make_features(self, bundles: Mapping[str, Any]) -> List[MicroFeature]:
        """Build every registered feature in declared order.

        Args:
            bundles: Dependency bundle per feature id

        Raises:
            MissingDependencies: If a feature has no bundle
            TypeError: If a bundle is not the type its factory expects
        """
        features = []
        for factory in self:
            if factory.feature_id not in bundles:
                raise MissingDependencies(factory.feature_id)
            bundle = bundles[factory.feature_id]
            if not isinstance(bundle, factory.bundle_type):
                raise TypeError(
                    f"Feature '{factory.feature_id}' expects {factory.bundle_type.__name__}, "
                    f"got {type(bundle).__name__}"
                )
            features.append(factory.make_feature(bundle))
        return features
