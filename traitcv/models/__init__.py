from .estimates import LABELS, CVEstimates, SampleMoments

__all__ = ["LABELS", "CVEstimates", "SampleMoments"]
