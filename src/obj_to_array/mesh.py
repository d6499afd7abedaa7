import itertools

import numpy


class Mesh:
    """Interleaved vertex records and the triangle list that indexes them."""

    def __init__(self, vertices: list, indices: list, stride: int):
        self.vertices = vertices
        self.indices = indices
        self.stride = stride

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def vertex_array(self, dtype=numpy.float64) -> numpy.ndarray:
        return numpy.array(list(itertools.chain.from_iterable(self.vertices)), dtype=dtype)

    def index_array(self, dtype=numpy.uint32) -> numpy.ndarray:
        return numpy.array(self.indices, dtype=dtype)

    def __repr__(self):
        return 'Mesh(vertices=%d, triangles=%d, stride=%d)' % (self.vertex_count, self.triangle_count, self.stride)
