"""Static widget catalogue shipped with the store."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Widget:
    id: str
    name: str
    description: str
    category: str
    image_url: str
    image_hint: str
    tags: Tuple[str, ...] = ()
    key_features: Tuple[str, ...] = ()
    whats_new: str = ""
    more_info: str = ""

    def summary(self) -> dict:
        """Compact shape used for listings and the recommendation prompt."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
        }


_DEFAULT_KEY_FEATURES: Tuple[str, ...] = (
    "Seamless integration with your existing workflow.",
    "Real-time data synchronization across all devices.",
    "Customizable themes and layout options.",
    "Accessible design for all users (WCAG 2.1 compliant).",
    "Advanced analytics and reporting dashboard.",
    "Automated alerts and smart notifications.",
    "Offline mode for uninterrupted productivity.",
    "Secure data encryption (end-to-end).",
)

_DEFAULT_WHATS_NEW = """
**Version 2.0.1**
This latest version introduces a redesigned user interface for better readability, performance enhancements for quicker load times, and three new data visualization options. We've also squashed some bugs for a smoother experience.
"""

_DEFAULT_MORE_INFO = """
| Key | Value |
| --- | --- |
| **Version** | 2.0.1 |
| **Languages** | English, Spanish |
| **Permissions** | [view details](#) |
| **Developer** | WidgetBuilders Inc. |
| **Website** | [view website](#) |
"""


def _widget(
    widget_id: str, name: str, description: str, category: str, image_hint: str, tags: List[str]
) -> Widget:
    return Widget(
        id=widget_id,
        name=name,
        description=description,
        category=category,
        image_url=f"https://picsum.photos/400/225?random={widget_id}",
        image_hint=image_hint,
        tags=tuple(tags),
        key_features=_DEFAULT_KEY_FEATURES,
        whats_new=_DEFAULT_WHATS_NEW,
        more_info=_DEFAULT_MORE_INFO,
    )


ALL_WIDGETS: Tuple[Widget, ...] = (
    _widget("1", "ChronoFlow",
            "Track your time with unparalleled precision and style. Integrates with your calendar.",
            "Productivity", "abstract gradient", ["time management", "calendar"]),
    _widget("2", "NexusConnect",
            "Stay connected with all your social media feeds in one unified dashboard.",
            "Social", "social network", ["friends", "updates"]),
    _widget("3", "AtmoSphere",
            "Get hyper-local weather forecasts with stunning visualizations and alerts.",
            "Weather", "weather map", ["forecast", "climate"]),
    _widget("4", "CodeStream",
            "A scratchpad for developers. Test code snippets in any language, instantly.",
            "Productivity", "code editor", ["development", "testing"]),
    _widget("5", "SoundWeave",
            "Discover and share music with a next-gen social music platform.",
            "Music", "music waveform", ["playlist", "discovery"]),
    _widget("6", "TaskMaster",
            "The ultimate to-do list and project management tool for power users.",
            "Productivity", "kanban board", ["projects", "to-do"]),
    _widget("7", "CardioFit",
            "Track your runs, analyze your performance, and reach your fitness goals.",
            "Health", "running shoes", ["running", "fitness"]),
    _widget("8", "Zenith",
            "Find your calm with guided meditations and mindfulness exercises.",
            "Health", "meditation landscape", ["meditation", "mindfulness"]),
    _widget("9", "TuneTrove",
            "Your personal DJ. Creates playlists based on your mood and activity.",
            "Music", "headphones abstract", ["DJ", "mood"]),
    _widget("10", "StormChaser",
            "Real-time storm tracking and severe weather alerts.",
            "Weather", "stormy sky", ["radar", "alerts"]),
    _widget("11", "Glimpse",
            "Share ephemeral photo stories with your closest friends.",
            "Social", "camera lens", ["photos", "stories"]),
    _widget("12", "NutriTrack",
            "Log your meals and track your nutrition with ease.",
            "Health", "healthy food", ["calories", "diet"]),
)

FEATURED_WIDGET_IDS: Tuple[str, ...] = ("1", "5", "8", "11")

WIDGET_OF_THE_DAY_REASON = "A standout choice for its innovative features and user-friendly design."
