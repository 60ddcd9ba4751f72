from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

BREUNIG_2001 = (
    "Breunig, R. (2001) An almost unbiased estimator of the coefficient of "
    "variation. Economics Letters, 70(1), 15-19."
)
BAO_2009 = (
    "Bao, Y. (2009) Finite-sample moments of the coefficient of variation. "
    "Econometric Theory, 25(1), 291-297."
)
YANG_2018 = (
    "Yang et al. (2018) How to accurately estimate intraspecific trait "
    "variation? Methods in Ecology and Evolution."
)


@dataclass(frozen=True)
class EstimatorMeta:
    label: str
    title: str
    family: str
    formula: str
    reference: str = ""


ESTIMATORS: Tuple[EstimatorMeta, ...] = (
    EstimatorMeta(
        label="CV1",
        title="Sample coefficient of variation",
        family="naive",
        formula="sd / mean",
    ),
    EstimatorMeta(
        label="CV2",
        title="Normal-theory bias-corrected CV",
        family="normal",
        formula="(1 + 1/(4N)) * CV1",
    ),
    EstimatorMeta(
        label="CV3",
        title="Breunig distribution-free CV",
        family="distribution-free",
        formula="sqrt(cv_2 - bias)",
        reference=BREUNIG_2001,
    ),
    EstimatorMeta(
        label="CV4",
        title="Bao distribution-free CV",
        family="distribution-free",
        formula="cv_1 - bias2",
        reference=BAO_2009,
    ),
    EstimatorMeta(
        label="CV5",
        title="Composite of CV3 and CV4",
        family="composite",
        formula="(CV3 + CV4) / 2",
        reference=YANG_2018,
    ),
    EstimatorMeta(
        label="CV6",
        title="Composite of CV2 and CV4",
        family="composite",
        formula="(CV2 + CV4) / 2",
        reference=YANG_2018,
    ),
)


def meta_by_label() -> Dict[str, EstimatorMeta]:
    return {m.label: m for m in ESTIMATORS}


def get_meta(label: str) -> EstimatorMeta:
    """Look up an estimator by label, case-insensitively ("cv3" -> CV3)."""
    try:
        return meta_by_label()[label.strip().upper()]
    except KeyError:
        raise KeyError(f"Unknown estimator: {label}") from None
