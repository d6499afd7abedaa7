import logging

from .errors import MalformedFaceError, MalformedCornerError, OutOfBoundsReferenceError
from .mesh import Mesh
from .reader import LineReader
from .tokenizer import tokenize, TokenError

logger = logging.getLogger(__name__)

TRIANGLE_CORNERS = (0, 1, 2)
QUAD_CORNERS = (0, 1, 2, 0, 2, 3)


def _face_corners(line: str) -> list:
    # One token past a quad so larger polygons are detected
    corners = tokenize(line, 5, sentinel='', convert=str)
    if len(corners) == 3:
        return [corners[i] for i in TRIANGLE_CORNERS]
    if len(corners) == 4:
        return [corners[i] for i in QUAD_CORNERS]
    raise MalformedFaceError('All faces must be triangles or quads', line)


def _resolve(location: int, data: list, corner: str) -> tuple:
    if location <= 0 or location > len(data):
        raise OutOfBoundsReferenceError('Vertex data out of bounds', corner)
    return data[location - 1]


def _make_vertex(corner: str, positions, texcoords, normals, disable_texture, disable_normal) -> tuple:
    try:
        locations = tokenize(corner, 3, skip_first=False, delimiter='/', sentinel=0, convert=int)
    except TokenError:
        raise MalformedCornerError('Malformed vertex', corner) from None
    if len(locations) <= 0 or corner.startswith('/'):
        raise MalformedCornerError('Malformed vertex', corner)
    vertex = _resolve(locations[0], positions, corner)
    if len(locations) > 1 and locations[1] != 0 and not disable_texture:
        vertex = vertex + _resolve(locations[1], texcoords, corner)
    if len(locations) > 2 and locations[2] != 0 and not disable_normal:
        vertex = vertex + _resolve(locations[2], normals, corner)
    return vertex


def build(reader: LineReader, positions: list, texcoords: list, normals: list,
          disable_texture: bool = False, disable_normal: bool = False) -> Mesh:
    """Turn the face lines left in `reader` into a vertex and an index buffer.

    Every distinct corner string becomes one vertex, so two corners that only
    differ in spelling ("1/1/1" and "01/1/1") are kept apart.
    """
    vertices = []
    indices = []
    index_cache = {}
    while True:
        line = reader.line
        if len(line) >= 2 and line[0] == 'f':
            for corner in _face_corners(line):
                index = index_cache.get(corner)
                if index is None:
                    vertices.append(_make_vertex(corner, positions, texcoords, normals, disable_texture, disable_normal))
                    index = index_cache[corner] = len(vertices) - 1
                indices.append(index)
        if not reader.advance():
            break

    stride = 3
    if len(texcoords) > 0 and not disable_texture:
        stride += 2
    if len(normals) > 0 and not disable_normal:
        stride += 3
    logger.debug('Built %d vertices and %d indices with stride %d', len(vertices), len(indices), stride)
    return Mesh(vertices, indices, stride)
