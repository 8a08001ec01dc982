# ==============================================
# RowDecoder
# ==============================================
#
# PURPOSE:
#   Turns one raw result row into a tag mapping and a typed field
#   mapping, using the column groups produced by the classifier.
#
# NULL HANDLING:
#   - A null tag cell is always left out of the tags.
#   - A null field cell is left out, unless zeroize_null is set, in
#     which case the zero value of its type is stored instead:
#       int → 0, float → 0.0, bool → False, string → ""
#
# ERRORS:
#   The first cell that does not parse as its configured type raises
#   TypeCoercionError naming the column and the raw text. No partial
#   row is returned.
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence

from sqlquery.analysis.roles import ColumnRole, ColumnRoleIndex
from .value_parser import RawCell, ValueParser


FieldValue = Any  # int | float | bool | str


@dataclass
class DecodedRow:
    tags: Dict[str, str] = field(default_factory=dict)
    fields: Dict[str, FieldValue] = field(default_factory=dict)


class RowDecoder:
    ZERO_VALUES: Dict[ColumnRole, FieldValue] = {
        ColumnRole.INT: 0,
        ColumnRole.FLOAT: 0.0,
        ColumnRole.BOOL: False,
        ColumnRole.STRING: "",
    }

    def __init__(self, zeroize_null: bool = False, value_parser: Optional[ValueParser] = None):
        self.zeroize_null = zeroize_null
        self.value_parser = value_parser or ValueParser()
        self._field_parsers: Dict[ColumnRole, Callable[[str, str], FieldValue]] = {
            ColumnRole.INT: self.value_parser.parse_int,
            ColumnRole.FLOAT: self.value_parser.parse_float,
            ColumnRole.BOOL: self.value_parser.parse_bool,
            ColumnRole.STRING: lambda column, text: text,
        }

    def decode(
        self,
        row: Sequence[Optional[RawCell]],
        columns: Sequence[str],
        index: ColumnRoleIndex
    ) -> DecodedRow:
        if len(row) != len(columns):
            raise ValueError(
                f"Row has {len(row)} cells but the result has {len(columns)} columns"
            )

        decoded = DecodedRow()

        # Tags are always strings and never zeroized
        for i in index.tags:
            if row[i] is not None:
                decoded.tags[columns[i]] = self.value_parser.to_text(row[i])

        for role in (ColumnRole.INT, ColumnRole.FLOAT, ColumnRole.BOOL, ColumnRole.STRING):
            parse = self._field_parsers[role]
            for i in index.group(role):
                cell = row[i]
                if cell is not None:
                    decoded.fields[columns[i]] = parse(columns[i], self.value_parser.to_text(cell))
                elif self.zeroize_null:
                    decoded.fields[columns[i]] = self.ZERO_VALUES[role]

        return decoded


def decode(
    row: Sequence[Optional[RawCell]],
    columns: Sequence[str],
    index: ColumnRoleIndex,
    zeroize_null: bool = False
) -> DecodedRow:
    """Decode one row without keeping a RowDecoder around."""
    return RowDecoder(zeroize_null).decode(row, columns, index)
