"""Scoring sub-package for the hireability project.

Exports the composite scorer so other modules can do::

    from hireability.scoring import calculate_hireability_score
"""

from hireability.scoring.composite import calculate_hireability_score

__all__ = ["calculate_hireability_score"]
