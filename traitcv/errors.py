"""
Error and warning types raised by the estimators.
"""
from typing import Optional


class TraitCVError(Exception):
    """Base class for traitcv errors"""


class InvalidInputError(TraitCVError, ValueError):
    """Sample cannot be used: too small after cleaning, wrong shape, or not numeric"""
    def __init__(self, message: str, n: Optional[int] = None, minimum: Optional[int] = None):
        self.message = message
        self.n = n
        self.minimum = minimum
        super().__init__(self.message)


class MissingValueWarning(UserWarning):
    """Missing values were dropped from the sample before estimation"""
