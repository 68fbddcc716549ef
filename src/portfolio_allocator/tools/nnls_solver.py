"""
Allocation Tool: Damped Non-Negative Least Squares
Lawson–Hanson active-set NNLS on numpy, plus the damped variant the engine
uses to pick a balanced solution from a rank-deficient constraint system.

    minimize ||A'x - b'||^2  subject to  x >= 0
    A' = [A; eps * I_N],  b' = [b; 0_N]

The damping rows make A' full column rank, so the solution is unique and
close to the minimum-norm solution of the undamped problem.

No LLM, no file I/O.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from portfolio_allocator.config.constants import (
    EPSILON,
    NNLS_MAX_ITER_FACTOR,
    NNLS_TOLERANCE_FACTOR,
)
from portfolio_allocator.exceptions import NNLSConvergenceError, NumericalError
from portfolio_allocator.tools.constraint_builder import ConstraintSystem

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Active-set NNLS
# ---------------------------------------------------------------------------

def _solve_passive(A: np.ndarray, b: np.ndarray, passive: np.ndarray) -> np.ndarray:
    """Unconstrained least squares on the passive columns; zeros elsewhere."""
    s = np.zeros(A.shape[1], dtype=np.float64)
    if passive.any():
        s[passive] = np.linalg.lstsq(A[:, passive], b, rcond=None)[0]
    return s


def nnls(
    A: np.ndarray,
    b: np.ndarray,
    max_iter: Optional[int] = None,
    tol: Optional[float] = None,
) -> tuple[np.ndarray, float]:
    """
    Solve min ||Ax - b||_2 subject to x >= 0 (Lawson & Hanson, 1974).

    Args:
        A: (M, N) matrix.
        b: length-M vector.
        max_iter: Bound on active-set iterations (default 3 * N).
        tol: Dual feasibility tolerance (default scales with machine
            epsilon, ||A||_1 and the problem size).

    Returns:
        (x, residual_norm) with every x entry >= 0.

    Raises:
        NumericalError: shapes disagree or inputs are not finite.
        NNLSConvergenceError: iteration bound exceeded.
    """
    A = np.asarray(A, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64).ravel()
    if A.ndim != 2 or A.shape[0] != b.shape[0]:
        raise NumericalError(
            f"NNLS shape mismatch: A is {A.shape}, b has length {b.shape[0]}"
        )
    if not (np.isfinite(A).all() and np.isfinite(b).all()):
        raise NumericalError("NNLS inputs contain NaN or infinite values")

    m, n = A.shape
    if n == 0:
        return np.zeros(0), float(np.linalg.norm(b))
    if max_iter is None:
        max_iter = NNLS_MAX_ITER_FACTOR * n
    if tol is None:
        tol = NNLS_TOLERANCE_FACTOR * np.finfo(np.float64).eps * np.linalg.norm(A, 1) * max(m, n)

    x = np.zeros(n, dtype=np.float64)
    passive = np.zeros(n, dtype=bool)
    # columns whose entry into the passive set failed numerically; cleared on progress
    rejected = np.zeros(n, dtype=bool)
    w = A.T @ (b - A @ x)
    iterations = 0

    while True:
        candidates = ~passive & ~rejected
        if not candidates.any() or w[candidates].max() <= tol:
            break

        iterations += 1
        if iterations > max_iter:
            raise NNLSConvergenceError(
                f"NNLS did not converge within {max_iter} iterations (N={n}, M={m})"
            )

        j = int(np.argmax(np.where(candidates, w, -np.inf)))
        passive[j] = True
        s = _solve_passive(A, b, passive)

        if s[j] <= 0.0:
            # w[j] > 0 guarantees s[j] > 0 in exact arithmetic
            passive[j] = False
            rejected[j] = True
            continue

        while (s[passive] <= 0.0).any():
            iterations += 1
            if iterations > max_iter:
                raise NNLSConvergenceError(
                    f"NNLS did not converge within {max_iter} iterations (N={n}, M={m})"
                )
            blocking = passive & (s <= 0.0)
            alpha = np.min(x[blocking] / (x[blocking] - s[blocking]))
            x = x + alpha * (s - x)
            passive &= x > tol
            x[~passive] = 0.0
            s = _solve_passive(A, b, passive)

        x = s
        rejected[:] = False
        w = A.T @ (b - A @ x)

    residual = float(np.linalg.norm(A @ x - b))
    logger.debug(f"NNLS converged after {iterations} iterations, residual={residual:.3e}")
    return x, residual


# ---------------------------------------------------------------------------
# Damped solve & residual metric
# ---------------------------------------------------------------------------

def solve_damped(
    system: ConstraintSystem,
    epsilon: float = EPSILON,
    max_iter: Optional[int] = None,
) -> np.ndarray:
    """
    Excess weights above the minimum for every instrument.

    Stacks epsilon * I_N under the membership matrix and N zeros under the
    reduced target, then runs NNLS. Round-off negatives are clipped to 0.
    """
    m, n = system.shape
    damped_matrix = np.vstack([system.matrix, epsilon * np.eye(n)])
    damped_target = np.concatenate([system.target, np.zeros(n)])
    x, _ = nnls(damped_matrix, damped_target, max_iter=max_iter)
    return np.maximum(x, 0.0)


def residual_error(
    system: ConstraintSystem,
    x: np.ndarray,
    epsilon: float = EPSILON,
) -> float:
    """
    RSE = max(||A x - b||_F - eps^2, 0).

    Subtracting eps^2 cancels the bias the damping rows introduce, so a
    feasible system reports exactly 0.
    """
    if system.matrix.shape[0] == 0:
        return 0.0
    residual = float(np.linalg.norm(system.matrix @ x - system.target))
    return max(residual - epsilon ** 2, 0.0)
