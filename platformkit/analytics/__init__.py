from platformkit.analytics.events import AnalyticsEvent
from platformkit.analytics.events import AppLaunched
from platformkit.analytics.events import ItemSelected
from platformkit.analytics.events import ItemType
from platformkit.analytics.events import PageName
from platformkit.analytics.events import TabSelected

__all__ = ["AnalyticsEvent", "AppLaunched", "TabSelected", "ItemSelected", "ItemType", "PageName"]
