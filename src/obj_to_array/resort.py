import functools
import logging

import numpy

from .mesh import Mesh

logger = logging.getLogger(__name__)

EPSILON = 1e-10


def _compare_position(a: tuple, b: tuple) -> int:
    # Z values closer than EPSILON fall through to X, otherwise Z decides
    if abs(a[2] - b[2]) < EPSILON:
        return (a[0] > b[0]) - (a[0] < b[0])
    return (a[2] > b[2]) - (a[2] < b[2])


def sort_by_position(mesh: Mesh) -> Mesh:
    """Reorder vertices by ascending Z, then X, and remap the index buffer."""
    order = sorted(range(mesh.vertex_count), key=functools.cmp_to_key(
        lambda i, j: _compare_position(mesh.vertices[i], mesh.vertices[j])))
    order = numpy.array(order, dtype=numpy.int64)
    remap = numpy.empty_like(order)
    remap[order] = numpy.arange(len(order))
    vertices = [mesh.vertices[i] for i in order]
    indices = remap[numpy.array(mesh.indices, dtype=numpy.int64)].tolist() if len(mesh.indices) > 0 else []
    logger.debug('Sorted %d vertices by position', len(vertices))
    return Mesh(vertices, indices, mesh.stride)
