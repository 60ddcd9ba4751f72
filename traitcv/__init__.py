"""traitcv - coefficient of variation estimators for trait samples."""

from traitcv.errors import InvalidInputError, MissingValueWarning, TraitCVError
from traitcv.models import LABELS, CVEstimates, SampleMoments
from traitcv.stats import (
    ESTIMATORS,
    CVEstimator,
    EstimatorMeta,
    estimate,
    get_meta,
    meta_by_label,
    sample_moments,
)

__version__ = "1.0.0"

__all__ = [
    "CVEstimator",
    "estimate",
    "sample_moments",
    "CVEstimates",
    "SampleMoments",
    "LABELS",
    "ESTIMATORS",
    "EstimatorMeta",
    "get_meta",
    "meta_by_label",
    "InvalidInputError",
    "MissingValueWarning",
    "TraitCVError",
]
