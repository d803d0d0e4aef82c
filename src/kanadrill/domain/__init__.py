# Domain Package
from .errors import AssetError, DistributionError, KanaDrillError, UnknownCommandError
from .models import StudyItem
from .ports import StudySetLoader

__all__ = [
    "AssetError",
    "DistributionError",
    "KanaDrillError",
    "StudyItem",
    "StudySetLoader",
    "UnknownCommandError",
]
