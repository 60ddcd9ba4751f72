from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

LABELS: Tuple[str, ...] = ("CV1", "CV2", "CV3", "CV4", "CV5", "CV6")


class CVEstimates(BaseModel):
    """Six CV estimates for one sample, labelled CV1..CV6 in that order.

    Entries may be NaN when the sample is degenerate (zero variance, zero
    mean, negative radicand in CV3).
    """

    model_config = ConfigDict(frozen=True)

    cv1: float = Field(alias="CV1")
    cv2: float = Field(alias="CV2")
    cv3: float = Field(alias="CV3")
    cv4: float = Field(alias="CV4")
    cv5: float = Field(alias="CV5")
    cv6: float = Field(alias="CV6")

    def __getitem__(self, label: str) -> float:
        if label not in LABELS:
            raise KeyError(label)
        return getattr(self, label.lower())

    def __iter__(self) -> Iterator[str]:
        return iter(LABELS)

    def __contains__(self, label: object) -> bool:
        return label in LABELS

    def __len__(self) -> int:
        return len(LABELS)

    def keys(self) -> List[str]:
        return list(LABELS)

    def values(self) -> List[float]:
        return [self[label] for label in LABELS]

    def items(self) -> List[Tuple[str, float]]:
        return [(label, self[label]) for label in LABELS]

    def as_dict(self) -> Dict[str, float]:
        """Ordered {"CV1": ..., ..., "CV6": ...} mapping."""
        return self.model_dump(by_alias=True)


class SampleMoments(BaseModel):
    """Intermediate quantities feeding the bias corrections."""

    model_config = ConfigDict(frozen=True)

    n: int
    n_missing: int = 0
    mean: float
    variance: float
    cv_2: float
    cv_1: float
    gamma_1: float
    gamma_2: float
    bias: float
    bias2: float
