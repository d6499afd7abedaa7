import math


class TokenError(ValueError):
    def __init__(self, field: str):
        super().__init__('Cannot convert field %r' % field)
        self.field = field


def _split(line: str, delimiter: str):
    # Fields after the last delimiter only count when non-empty
    fields = line.split(delimiter)
    if len(fields) > 0 and len(fields[-1]) <= 0:
        fields.pop()
    return fields


def tokenize(line: str, max_tokens: int = 3, skip_first: bool = True, delimiter: str = ' ', sentinel=0.0, convert=float) -> list:
    """Split a line into at most max_tokens converted values.

    Empty fields between two delimiters produce the sentinel. A field that
    cannot be converted raises TokenError; a line without any field yields
    an empty list.
    """
    fields = _split(line, delimiter)
    if skip_first:
        fields = fields[1:]
    values = []
    for field in fields[:max_tokens]:
        if len(field) <= 0:
            values.append(sentinel)
            continue
        try:
            value = convert(field)
        except ValueError:
            raise TokenError(field) from None
        # Numbers must be finite and spelled without digit separators
        if isinstance(value, (int, float)) and ('_' in field or not math.isfinite(value)):
            raise TokenError(field)
        values.append(value)
    return values
