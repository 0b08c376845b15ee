from .feature_store import FeatureFile, FeatureStore, RunnerWriter

__all__ = [
    "FeatureFile",
    "FeatureStore",
    "RunnerWriter",
]
