"""
Unit tests for the estimator catalog and the result records.
"""

import math

import pytest
from pydantic import ValidationError

from traitcv import ESTIMATORS, LABELS, CVEstimates, estimate, get_meta, meta_by_label


def test_catalog_order_matches_labels():
    """Test the catalog lists CV1..CV6 in output order."""
    assert tuple(m.label for m in ESTIMATORS) == LABELS


def test_meta_by_label():
    """Test lookup table covers every estimator."""
    metas = meta_by_label()

    assert set(metas) == set(LABELS)
    assert metas["CV3"].family == "distribution-free"
    assert "Breunig" in metas["CV3"].reference
    assert "Bao" in metas["CV4"].reference


def test_families():
    """Test the family of each estimator."""
    assert [m.family for m in ESTIMATORS] == [
        "naive",
        "normal",
        "distribution-free",
        "distribution-free",
        "composite",
        "composite",
    ]


def test_get_meta_case_insensitive():
    """Test labels are matched regardless of case and whitespace."""
    assert get_meta(" cv5 ").label == "CV5"


def test_get_meta_unknown():
    """Test an unknown label raises KeyError."""
    with pytest.raises(KeyError, match="Unknown estimator"):
        get_meta("CV7")


def test_meta_is_frozen():
    """Test catalog entries cannot be modified."""
    with pytest.raises(AttributeError):
        ESTIMATORS[0].title = "changed"


def _estimates(**overrides):
    values = {label: 0.1 * (i + 1) for i, label in enumerate(LABELS)}
    values.update(overrides)
    return CVEstimates(**values)


def test_estimates_mapping_access():
    """Test label lookup, dict conversion and iteration order."""
    est = _estimates()

    assert est["CV4"] == pytest.approx(0.4)
    assert est.cv4 == est["CV4"]
    assert dict(est) == est.as_dict()
    assert list(est.as_dict()) == list(LABELS)
    assert est.values() == [est[label] for label in LABELS]


def test_estimates_iterate_over_labels():
    """Test iteration, membership and items follow the CV labels."""
    est = _estimates()

    assert list(est) == list(LABELS)
    assert "CV1" in est
    assert "cv1" not in est
    assert "CV7" not in est
    assert est.items() == [(label, est[label]) for label in LABELS]


def test_estimates_unknown_label():
    """Test lowercase or unknown keys are rejected."""
    est = _estimates()

    with pytest.raises(KeyError):
        est["cv1"]
    with pytest.raises(KeyError):
        est["CV7"]


def test_estimates_frozen():
    """Test results are immutable."""
    est = _estimates()

    with pytest.raises(ValidationError):
        est.cv1 = 1.0


def test_estimates_allow_nan():
    """Test NaN is a valid estimate value."""
    est = _estimates(CV3=float("nan"))

    assert math.isnan(est["CV3"])
    assert math.isnan(est.model_dump(by_alias=True)["CV3"])


def test_estimate_serializes_by_label(normal_sample):
    """Test model_dump(by_alias=True) keeps the CV labels."""
    dumped = estimate(normal_sample).model_dump(by_alias=True)

    assert list(dumped) == list(LABELS)
