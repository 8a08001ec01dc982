# ==============================================
# Column Roles (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that describe the INPUT and OUTPUT of column
#   classification. The role config comes from user configuration;
#   the role index is what the classifier produces for one query.
#
# ENUMS:
# ------
# - ColumnRole(Enum): TAG, INT, FLOAT, BOOL, STRING
#     The role a result column plays in an emitted metric.
#
# CLASSES:
# --------
# - ColumnRoleConfig (frozen dataclass)
#     tag_names, int_names, float_names, bool_names: tuple[str, ...]
#     Lives for the whole run.
#
# - ColumnRoleIndex (dataclass)
#     One ordered list of column indices per role. Built fresh for
#     every query since queries can return different columns.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple


class ColumnRole(Enum):
    """
    Role of a result column.

    - TAG: string-valued indexed attribute
    - INT / FLOAT / BOOL: typed field
    - STRING: catch-all field for every unlisted column
    """
    TAG = "tag"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"


@dataclass(frozen=True)
class ColumnRoleConfig:
    """User-supplied column-name lists, one per explicit role."""

    tag_names: Tuple[str, ...] = ()
    int_names: Tuple[str, ...] = ()
    float_names: Tuple[str, ...] = ()
    bool_names: Tuple[str, ...] = ()

    @classmethod
    def from_lists(
        cls,
        tag_cols: Iterable[str] = (),
        int_fields: Iterable[str] = (),
        float_fields: Iterable[str] = (),
        bool_fields: Iterable[str] = (),
    ) -> "ColumnRoleConfig":
        return cls(
            tag_names=tuple(tag_cols),
            int_names=tuple(int_fields),
            float_names=tuple(float_fields),
            bool_names=tuple(bool_fields),
        )

    def names_for(self, role: ColumnRole) -> Tuple[str, ...]:
        """Return the configured names for an explicit role (STRING has none)."""
        return {
            ColumnRole.TAG: self.tag_names,
            ColumnRole.INT: self.int_names,
            ColumnRole.FLOAT: self.float_names,
            ColumnRole.BOOL: self.bool_names,
        }.get(role, ())

    def overlaps(self) -> Dict[str, List[ColumnRole]]:
        """
        Find column names listed under more than one role.

        Returns:
            Mapping of column name to the roles it is listed under, in
            priority order. The first role is the one that applies.
        """
        seen: Dict[str, List[ColumnRole]] = {}
        for role in (ColumnRole.TAG, ColumnRole.INT, ColumnRole.FLOAT, ColumnRole.BOOL):
            for name in dict.fromkeys(self.names_for(role)):
                seen.setdefault(name, []).append(role)
        return {name: roles for name, roles in seen.items() if len(roles) > 1}


@dataclass
class ColumnRoleIndex:
    """
    Column indices grouped by role.

    The five groups partition range(len(columns)); order inside each
    group follows the result column order.
    """

    tags: List[int] = field(default_factory=list)
    ints: List[int] = field(default_factory=list)
    floats: List[int] = field(default_factory=list)
    bools: List[int] = field(default_factory=list)
    strings: List[int] = field(default_factory=list)

    def group(self, role: ColumnRole) -> List[int]:
        return {
            ColumnRole.TAG: self.tags,
            ColumnRole.INT: self.ints,
            ColumnRole.FLOAT: self.floats,
            ColumnRole.BOOL: self.bools,
            ColumnRole.STRING: self.strings,
        }[role]

    def role_of(self, column_index: int) -> ColumnRole:
        for role in ColumnRole:
            if column_index in self.group(role):
                return role
        raise KeyError(column_index)

    def counts(self) -> Dict[str, int]:
        """Group sizes keyed by role value, for logging."""
        return {role.value: len(self.group(role)) for role in ColumnRole}

    def to_dict(self, columns: Sequence[str]) -> Dict[str, List[str]]:
        """Column names per role, for display."""
        return {
            role.value: [columns[i] for i in self.group(role)]
            for role in ColumnRole
        }
