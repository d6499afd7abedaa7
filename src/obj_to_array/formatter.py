import numpy

from .mesh import Mesh


def _format_float(value: float, precision: int) -> str:
    return '%.*g' % (precision, value)


def _format_array(name: str, values: list, stride: int, indent: str) -> str:
    lines = []
    for start in range(0, len(values), stride):
        lines.append('\n' + indent + ' '.join(value + ',' for value in values[start:start + stride]))
    return 'let %s = [%s\n];\n\n' % (name, ''.join(lines))


def format_javascript(mesh: Mesh, precision: int = 5, indent: int = 4, use_tabs: bool = False,
                      vertex_name: str = 'vbo', index_name: str = 'ebo') -> str:
    """Render the mesh as two JavaScript array literals.

    Vertex values wrap every `stride` values and indices every triangle.
    """
    indent = '\t' if use_tabs else ' ' * indent
    vertex_values = [_format_float(value, precision) for value in mesh.vertex_array().tolist()]
    index_values = [str(index) for index in mesh.indices]
    return (_format_array(vertex_name, vertex_values, mesh.stride, indent)
            + _format_array(index_name, index_values, 3, indent))


def write_binary(mesh: Mesh, stream):
    """Write the buffers as little-endian float32 vertices and uint32 indices.

    The data is preceded by three uint32 values: stride, number of vertex
    values and number of indices.
    """
    vertices = mesh.vertex_array(numpy.dtype('<f4'))
    indices = mesh.index_array(numpy.dtype('<u4'))
    stream.write(mesh.stride.to_bytes(4, 'little'))
    stream.write(vertices.shape[0].to_bytes(4, 'little'))
    stream.write(indices.shape[0].to_bytes(4, 'little'))
    stream.write(vertices.tobytes('C'))
    stream.write(indices.tobytes('C'))
