import logging
from pathlib import Path

from .builder import build
from .errors import EmptyGeometryError, PrematureEndOfInputError
from .mesh import Mesh
from .reader import LineReader, read_attribute_block, ATTRIBUTE_NAME
from .resort import sort_by_position as _sort_by_position

logger = logging.getLogger(__name__)


def _read_block(reader: LineReader, tag: str) -> list:
    attributes = read_attribute_block(reader, tag)
    if tag == 'v ' and len(attributes) <= 0:
        raise EmptyGeometryError('Could not parse any vertex positions')
    if reader.exhausted:
        raise PrematureEndOfInputError('Unexpected end of file after %s' % ATTRIBUTE_NAME[tag])
    return attributes


def convert(stream, disable_texture: bool = False, disable_normal: bool = False, sort_by_position: bool = False) -> Mesh:
    """Convert an OBJ text stream into a Mesh.

    The stream must list positions, then texture coordinates, then normals,
    then faces. Any structural problem raises an ObjParseError subclass.
    """
    reader = LineReader(stream)
    positions = _read_block(reader, 'v ')
    texcoords = _read_block(reader, 'vt')
    normals = _read_block(reader, 'vn')
    mesh = build(reader, positions, texcoords, normals, disable_texture=disable_texture, disable_normal=disable_normal)
    if sort_by_position:
        mesh = _sort_by_position(mesh)
    return mesh


def convert_file(path, **kwargs) -> Mesh:
    path = Path(path).resolve()
    logger.debug('Reading %s', path)
    with open(path, 'r', encoding='latin-1') as file:
        return convert(file, **kwargs)
