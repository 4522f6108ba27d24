"""Host shell: owns composition and the lifecycle of feature modules.

The shell only sees :class:`MicroFeature` handles.  It never touches the
resource client or any wire detail; those stay behind the dependency bundles
built by the active :class:`AppConfig`.
"""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from platformkit.analytics.events import AppLaunched
from platformkit.analytics.events import TabSelected
from platformkit.core.config import AppConfig
from platformkit.core.interfaces import MicroFeature
from platformkit.utils.log import get_logger


class AppShell:
    """Composes feature modules and hands out their root views per tab."""

    def __init__(self, config: AppConfig):
        self.config = config
        self._log = get_logger(component="shell")

        # Process-wide collaborators, created once at composition time
        self.networking = config.create_resource_client()
        self.analytics = config.create_analytics()
        self.broadcast = config.create_broadcast_channel()
        self.registry = config.create_registry(self.broadcast)

        self._features: List[MicroFeature] = []
        self._views: Dict[str, Any] = {}
        self.selected: Optional[str] = None

    @property
    def features(self) -> List[MicroFeature]:
        return list(self._features)

    def launch(self) -> List[MicroFeature]:
        """Build every registered feature and record the launch."""
        bundles = self.config.create_dependencies(self.networking, self.analytics)
        self._features = self.registry.make_features(bundles)
        self.analytics.track(AppLaunched())
        self._log.info("shell_launched", features=[feature.id for feature in self._features])
        return self.features

    def feature(self, feature_id: str) -> MicroFeature:
        for feature in self._features:
            if feature.id == feature_id:
                return feature
        raise KeyError(f"Unknown feature '{feature_id}'")

    def root_view(self, feature_id: str) -> Any:
        """Return the feature's root view, creating it on first use."""
        if feature_id not in self._views:
            self._views[feature_id] = self.feature(feature_id).make_root_view()
        return self._views[feature_id]

    def select_tab(self, feature_id: str) -> Any:
        feature = self.feature(feature_id)
        self.selected = feature_id
        self.analytics.track(TabSelected(title=feature.title))
        return self.root_view(feature_id)
