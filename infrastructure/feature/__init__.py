# infrastructure/feature/__init__.py
from infrastructure.feature.file_source import FeatureFileSource, FeatureSourceError

__all__ = [
    "FeatureFileSource",
    "FeatureSourceError",
]
