# ==============================================
# ANALYSIS: COLUMN CLASSIFICATION
# ==============================================
#
# Decides which role each result column plays.
#
# Modules:
# --------
# - roles.py      → ColumnRole, ColumnRoleConfig, ColumnRoleIndex
# - classifier.py → ColumnClassifier (first-match role rules)
#
# ==============================================

from .roles import ColumnRole, ColumnRoleConfig, ColumnRoleIndex
from .classifier import ColumnClassifier, classify

__all__ = [
    "ColumnRole",
    "ColumnRoleConfig",
    "ColumnRoleIndex",
    "ColumnClassifier",
    "classify",
]
