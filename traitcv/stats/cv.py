"""Coefficient of variation - six estimators from one trait sample."""

from __future__ import annotations

import logging
import warnings
from typing import Any, Tuple

import numpy as np
import pandas as pd
from scipy import stats

from traitcv.config import settings
from traitcv.errors import InvalidInputError, MissingValueWarning
from traitcv.models.estimates import CVEstimates, SampleMoments

logger = logging.getLogger(__name__)


def _clean_sample(sample: Any) -> Tuple[np.ndarray, int]:
    """Drop missing markers (None, NaN, pd.NA) and coerce the rest to float64.

    Returns the cleaned array and the number of values removed.
    """
    if isinstance(sample, pd.Series):
        series = sample
    else:
        if not hasattr(sample, "__len__") and hasattr(sample, "__iter__"):
            sample = list(sample)
        arr = np.asarray(sample, dtype=object)
        if arr.ndim != 1:
            raise InvalidInputError(
                f"sample must be a one-dimensional sequence, got {arr.ndim} dimension(s)"
            )
        series = pd.Series(arr)

    missing = series.isna().to_numpy()

    try:
        coerced = pd.to_numeric(series[~missing], errors="raise").to_numpy(dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"sample contains non-numeric values: {e}") from e

    # to_numeric turns blank strings into NaN; those are missing too.
    blank = np.isnan(coerced)
    clean = coerced[~blank]
    n_missing = int(missing.sum()) + int(blank.sum())

    if n_missing:
        warnings.warn(
            f"{n_missing} missing value(s) detected in sample and removed",
            MissingValueWarning,
            stacklevel=3,
        )

    n = len(clean)
    minimum = settings.min_sample_size
    if n < minimum:
        raise InvalidInputError(
            f"sample too small: {n} valid value(s), minimum sample size is {minimum}",
            n=n,
            minimum=minimum,
        )
    return clean, n_missing


def _moments(clean: np.ndarray, n_missing: int = 0) -> SampleMoments:
    n = len(clean)

    with np.errstate(all="ignore"):
        y_bar = np.mean(clean)
        s2_hat = np.var(clean, ddof=1)
        cv_2 = s2_hat / y_bar ** 2
        cv_1 = np.sqrt(cv_2)

        z = (clean - y_bar) / np.sqrt(s2_hat)
        gamma_1 = np.sum(z ** 3) / n
        gamma_2 = np.sum(z ** 4) / n

        bias = cv_2 ** 1.5 / n * (3 * np.sqrt(cv_2) - 2 * gamma_1)
        bias2 = (
            cv_1 ** 3 / n
            - cv_1 / (4 * n)
            - cv_1 ** 2 * gamma_1 / (2 * n)
            - cv_1 * gamma_2 / (8 * n)
        )

    if s2_hat == 0:
        logger.info("Zero variance sample (n=%d); skewness and kurtosis are undefined", n)
    if y_bar == 0:
        logger.info("Zero mean sample (n=%d); CV is undefined", n)

    return SampleMoments(
        n=n,
        n_missing=n_missing,
        mean=float(y_bar),
        variance=float(s2_hat),
        cv_2=float(cv_2),
        cv_1=float(cv_1),
        gamma_1=float(gamma_1),
        gamma_2=float(gamma_2),
        bias=float(bias),
        bias2=float(bias2),
    )


class CVEstimator:
    """
    Estimators covered:
    1. CV1 - sample sd / sample mean
    2. CV2 - CV1 with the normal-theory correction (1 + 1/4N)
    3. CV3 - Breunig (2001), bias-corrected squared CV
    4. CV4 - Bao (2009), bias-corrected CV
    5. CV5 - mean of CV3 and CV4
    6. CV6 - mean of CV2 and CV4

    Degenerate samples never raise: zero variance, zero mean and a negative
    radicand in CV3 come back as NaN/inf in the affected estimates only.
    """

    @staticmethod
    def sample_moments(sample: Any) -> SampleMoments:
        """Mean, variance, standardized skewness/kurtosis and the two bias terms."""
        clean, n_missing = _clean_sample(sample)
        return _moments(clean, n_missing)

    @staticmethod
    def estimate(sample: Any) -> CVEstimates:
        """Six CV estimates (CV1..CV6) for a sample of at least 10 values.

        Missing values are removed with a MissingValueWarning. Raises
        InvalidInputError when fewer than the minimum number of values remain.
        """
        clean, n_missing = _clean_sample(sample)
        m = _moments(clean, n_missing)
        n = m.n

        with np.errstate(all="ignore"):
            cv1 = stats.variation(clean, ddof=1)
            cv2 = (1 + 1 / (4 * n)) * cv1
            cv3 = np.sqrt(np.float64(m.cv_2) - m.bias)
            cv4 = np.float64(m.cv_1) - m.bias2
            cv5 = (cv3 + cv4) / 2
            cv6 = (cv2 + cv4) / 2

        result = CVEstimates(
            CV1=float(cv1),
            CV2=float(cv2),
            CV3=float(cv3),
            CV4=float(cv4),
            CV5=float(cv5),
            CV6=float(cv6),
        )
        logger.debug("CV estimates (n=%d, removed=%d): %s", n, n_missing, result.as_dict())
        return result


sample_moments = CVEstimator.sample_moments
estimate = CVEstimator.estimate
