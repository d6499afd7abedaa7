import logging

from .errors import StructuralParseError
from .tokenizer import tokenize, TokenError

logger = logging.getLogger(__name__)

ATTRIBUTE_NAME = {
    'v ': 'vertex positions',
    'vt': 'texture coordinates',
    'vn': 'vertex normals'
}

ATTRIBUTE_WIDTH = {
    'v ': 3,
    'vt': 2,
    'vn': 3
}


class LineReader:
    """One-line lookahead over a text stream.

    `line` holds the current line without its line terminator. It starts out
    empty, so the first consumer reads the first line of the stream itself.
    """

    def __init__(self, stream):
        self.__lines = iter(stream)
        self.line = ''
        self.line_number = 0
        self.exhausted = False

    def advance(self) -> bool:
        try:
            line = next(self.__lines)
        except StopIteration:
            self.line = ''
            self.exhausted = True
            return False
        self.line = line.rstrip('\r\n')
        self.line_number += 1
        return True


def is_skipped(line: str) -> bool:
    return len(line) < 2 or line[0] == '#'


def read_attribute_block(reader: LineReader, tag: str) -> list:
    """Read the run of lines starting with `tag` ('v ', 'vt' or 'vn').

    Blank and comment lines inside the run are skipped. Reading stops at the
    first line of another category, which is left in `reader.line`.
    """
    width = ATTRIBUTE_WIDTH[tag]
    attributes = []
    while True:
        line = reader.line
        if not is_skipped(line):
            if line[:2] != tag:
                break
            try:
                values = tokenize(line)
            except TokenError:
                values = []
            if len(values) <= 0:
                raise StructuralParseError('Malformed %s on line %d' % (ATTRIBUTE_NAME[tag], reader.line_number), line)
            values += [0.0] * (3 - len(values))
            attributes.append(tuple(values[:width]))
        if not reader.advance():
            break
    logger.debug('Read %d %r attributes', len(attributes), tag.strip())
    return attributes
