# ==============================================
# ColumnClassifier
# ==============================================
#
# PURPOSE:
#   Partitions the columns of a query result into tag, int, float,
#   bool and string groups using the configured column-name lists.
#
# CLASS: ColumnClassifier
# -----------------------
#   Stateless apart from the role config it is built with.
#
#   - classify(columns: Sequence[str]) -> ColumnRoleIndex
#       Walks the columns once. Each column goes to the FIRST rule
#       that matches, in this order:
#
#         RULE 1: listed in tag_cols      → TAG
#         RULE 2: listed in int_fields    → INT
#         RULE 3: listed in float_fields  → FLOAT
#         RULE 4: listed in bool_fields   → BOOL
#         otherwise                       → STRING
#
#       A name listed twice is resolved by this order, so a column in
#       both tag_cols and int_fields is a tag.
#
# ==============================================

from typing import Callable, List, Sequence, Tuple

from .roles import ColumnRole, ColumnRoleConfig, ColumnRoleIndex


RoleRule = Tuple[Callable[[str], bool], ColumnRole]


class ColumnClassifier:
    PRIORITY = (ColumnRole.TAG, ColumnRole.INT, ColumnRole.FLOAT, ColumnRole.BOOL)

    def __init__(self, roles: ColumnRoleConfig):
        self.roles = roles
        self._rules: List[RoleRule] = [
            (self._member_of(roles.names_for(role)), role) for role in self.PRIORITY
        ]

    @staticmethod
    def _member_of(names: Sequence[str]) -> Callable[[str], bool]:
        lookup = frozenset(names)
        return lambda column: column in lookup

    @property
    def rules(self) -> List[RoleRule]:
        """The ordered (predicate, role) pairs, highest priority first."""
        return list(self._rules)

    def role_for(self, column: str) -> ColumnRole:
        for matches, role in self._rules:
            if matches(column):
                return role
        return ColumnRole.STRING

    def classify(self, columns: Sequence[str]) -> ColumnRoleIndex:
        index = ColumnRoleIndex()
        for i, column in enumerate(columns):
            index.group(self.role_for(column)).append(i)
        return index


def classify(columns: Sequence[str], roles: ColumnRoleConfig) -> ColumnRoleIndex:
    """Classify `columns` against `roles` in one call."""
    return ColumnClassifier(roles).classify(columns)
