"""Coefficient of variation estimators and their catalog."""

from .catalog import ESTIMATORS, EstimatorMeta, get_meta, meta_by_label
from .cv import CVEstimator, estimate, sample_moments

__all__ = [
    "CVEstimator",
    "estimate",
    "sample_moments",
    "ESTIMATORS",
    "EstimatorMeta",
    "get_meta",
    "meta_by_label",
]
