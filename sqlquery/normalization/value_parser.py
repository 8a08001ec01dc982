import math
import re
from typing import Union

from sqlquery.exceptions import TypeCoercionError

RawCell = Union[bytes, bytearray, memoryview, str]


class ValueParser:
    INT64_MIN = -(2 ** 63)
    INT64_MAX = 2 ** 63 - 1

    BOOL_TRUE_VARIANTS = {"1", "t", "T", "TRUE", "true", "True"}
    BOOL_FALSE_VARIANTS = {"0", "f", "F", "FALSE", "false", "False"}

    INT_PATTERN = re.compile(r'^[+-]?[0-9]+$', re.ASCII)
    DECIMAL_FLOAT_PATTERN = re.compile(
        r'^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$',
        re.ASCII
    )
    HEX_FLOAT_PATTERN = re.compile(
        r'^[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+$',
        re.ASCII
    )
    SPECIAL_FLOAT_PATTERN = re.compile(r'^([+-]?(inf|infinity)|nan)$', re.IGNORECASE)

    @classmethod
    def to_text(cls, cell: RawCell) -> str:
        if isinstance(cell, str):
            return cell
        if isinstance(cell, memoryview):
            cell = cell.tobytes()
        return bytes(cell).decode("utf-8", errors="replace")

    @classmethod
    def parse_int(cls, column: str, text: str) -> int:
        if not cls.INT_PATTERN.fullmatch(text):
            raise TypeCoercionError(column, text, "int")
        value = int(text)
        if value < cls.INT64_MIN or value > cls.INT64_MAX:
            raise TypeCoercionError(column, text, "int")
        return value

    @classmethod
    def parse_float(cls, column: str, text: str) -> float:
        if cls.SPECIAL_FLOAT_PATTERN.fullmatch(text):
            return float(text)

        if cls.DECIMAL_FLOAT_PATTERN.fullmatch(text):
            value = float(text)
        elif cls.HEX_FLOAT_PATTERN.fullmatch(text):
            try:
                value = float.fromhex(text)
            except OverflowError:
                raise TypeCoercionError(column, text, "float")
        else:
            raise TypeCoercionError(column, text, "float")

        # A finite literal that rounds to infinity is out of range.
        if math.isinf(value):
            raise TypeCoercionError(column, text, "float")
        return value

    @classmethod
    def parse_bool(cls, column: str, text: str) -> bool:
        if text in cls.BOOL_TRUE_VARIANTS:
            return True
        if text in cls.BOOL_FALSE_VARIANTS:
            return False
        raise TypeCoercionError(column, text, "bool")
