"""
Minimal formula-to-design-matrix conversion

Supports the subset of Wilkinson notation needed to weight simulated
components:

- ``1`` / ``0`` for including or removing the intercept
- categorical factors (treatment coding, first level as reference)
- numeric factors (used as continuous predictors)
- ``a:b`` interactions (products of the per-factor columns)

A left-hand side such as ``0 ~ 1 + cond`` is accepted and ignored.
"""

import itertools
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..core.exceptions import ComponentConfigError


def parse_formula(formula: str) -> Tuple[bool, List[Tuple[str, ...]]]:
    """
    Split a formula into its intercept flag and predictor terms

    Returns:
        Tuple of (has_intercept, terms) where each term is a tuple of factor names
    """
    rhs = formula.split("~", 1)[-1]
    has_intercept = True
    terms = []
    for raw in rhs.split("+"):
        term = raw.strip()
        if not term:
            continue
        if term == "1":
            has_intercept = True
        elif term in ("0", "-1"):
            has_intercept = False
        else:
            factors = tuple(part.strip() for part in term.split(":"))
            if any(not part for part in factors):
                raise ComponentConfigError(f"Malformed term '{term}' in formula '{formula}'")
            terms.append(factors)
    return has_intercept, terms


def _factor_columns(
    events: pd.DataFrame,
    factor: str,
    contrasts: Dict[str, Sequence],
    full_rank_dummy: bool
) -> Tuple[np.ndarray, List[str]]:
    """Columns encoding a single factor"""
    if factor not in events.columns:
        raise ComponentConfigError(
            f"Formula factor '{factor}' not in design. Available factors: {list(events.columns)}"
        )
    values = events[factor]

    if factor not in contrasts and pd.api.types.is_numeric_dtype(values):
        return values.to_numpy(dtype=float)[:, np.newaxis], [factor]

    if factor in contrasts:
        levels = list(contrasts[factor])
        unknown = set(values.unique()) - set(levels)
        if unknown:
            raise ComponentConfigError(f"Levels {sorted(map(str, unknown))} of '{factor}' missing from contrasts")
    else:
        levels = sorted(values.unique(), key=str)

    coded = levels if full_rank_dummy else levels[1:]
    columns = np.column_stack([(values == level).to_numpy(dtype=float) for level in coded]) \
        if coded else np.zeros((len(values), 0))
    return columns, [f"{factor}: {level}" for level in coded]


def design_matrix(
    formula: str,
    events: pd.DataFrame,
    contrasts: Optional[Dict[str, Sequence]] = None
) -> Tuple[np.ndarray, List[str]]:
    """
    Build the model matrix of a formula for the given events

    Args:
        formula: Formula string, e.g. ``"0 ~ 1 + condition"``
        events: Event table (one row per event)
        contrasts: Optional factor -> level order; the first level is the
            reference. Listing a numeric factor here treats it as categorical.

    Returns:
        Tuple of (matrix [n_events x n_columns], column names)
    """
    contrasts = contrasts or {}
    has_intercept, terms = parse_formula(formula)
    n_events = len(events)

    blocks = []
    names = []
    if has_intercept:
        blocks.append(np.ones((n_events, 1)))
        names.append("(Intercept)")

    # Without an intercept, the first categorical main effect is fully dummy coded
    needs_full_rank = not has_intercept
    for term in terms:
        term_cols = []
        for factor in term:
            full = needs_full_rank and len(term) == 1
            cols, col_names = _factor_columns(events, factor, contrasts, full)
            if full and col_names != [factor]:
                needs_full_rank = False
            term_cols.append((cols, col_names))

        # Interaction: every combination of the factors' columns
        for combo in itertools.product(*(range(len(n)) for _, n in term_cols)):
            product = np.ones(n_events)
            label = []
            for (cols, col_names), idx in zip(term_cols, combo):
                product = product * cols[:, idx]
                label.append(col_names[idx])
            blocks.append(product[:, np.newaxis])
            names.append(" & ".join(label))

    if not blocks:
        return np.zeros((n_events, 0)), []
    return np.hstack(blocks), names
