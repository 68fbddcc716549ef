"""
Exception hierarchy for the portfolio allocator.

This module defines all custom exceptions raised by the allocation engine.
Configuration errors are caller mistakes detected before any numerical work
starts; numerical errors come out of the solver itself. An infeasible
constraint system is not an error: the engine returns its least-squares
allocation with a positive RSE instead.
"""

from typing import Optional


# ============================================================================
# BASE EXCEPTION CLASSES
# ============================================================================

class AllocatorException(Exception):
    """
    Base exception for all allocator errors.

    Inheriting from this allows catching all engine errors:
        try:
            ...
        except AllocatorException as e:
            ...
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class ConfigurationError(AllocatorException):
    """Base class for invalid instruments, constraints or options."""
    pass


class CalculationError(AllocatorException):
    """Base class for failures inside the numerical pipeline."""
    pass


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class EmptyUniverseError(ConfigurationError):
    """
    Raised when no instruments are passed to the engine.

    Example:
        raise EmptyUniverseError("Cannot allocate over an empty instrument list")
    """
    pass


class DuplicateInstrumentError(ConfigurationError):
    """
    Raised when two instruments share a ticker.

    Example:
        raise DuplicateInstrumentError("Ticker 'AAPL' appears more than once")
    """
    pass


class TickMismatchError(ConfigurationError):
    """
    Raised when the tick does not divide the total amount evenly.

    Example:
        raise TickMismatchError("Tick 3 does not divide total amount 100")
    """
    pass


class MinimumAmountError(ConfigurationError):
    """
    Raised when the minimum amount cannot be granted to every instrument.

    Example:
        raise MinimumAmountError("5 instruments x minimum 30 exceeds total 100")
    """
    pass


class UnknownCategoryError(ConfigurationError):
    """
    Raised when a constraint label is not a region, sector, size or style.

    Example:
        raise UnknownCategoryError("Unknown category label 'Antarctica'")
    """
    pass


class UnreachableConstraintError(ConfigurationError):
    """
    Raised when a non-zero proportion targets a category no instrument belongs to.

    Example:
        raise UnreachableConstraintError("Japan=0.2 but no instrument is in Japan")
    """
    pass


# ============================================================================
# NUMERICAL EXCEPTIONS
# ============================================================================

class NumericalError(CalculationError):
    """
    Raised when the solver receives or produces unusable numbers.

    Example:
        raise NumericalError("Constraint matrix contains NaN entries")
    """
    pass


class NNLSConvergenceError(NumericalError):
    """
    Raised when the NNLS active-set iteration exceeds its bound.

    Example:
        raise NNLSConvergenceError("NNLS did not converge within 1500 iterations")
    """
    pass
