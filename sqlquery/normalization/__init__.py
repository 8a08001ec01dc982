# ==============================================
# NORMALIZATION: ROW DECODING
# ==============================================
#
# Turns raw driver cells into typed tag and field values.
#
# Modules:
# --------
# - value_parser.py → Parse cell text as int64 / float64 / bool
# - row_decoder.py  → Decode a full row with the null policy applied
#
# ==============================================

from .value_parser import ValueParser
from .row_decoder import DecodedRow, RowDecoder, decode

__all__ = ["ValueParser", "DecodedRow", "RowDecoder", "decode"]
