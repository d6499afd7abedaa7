from .errors import (
    ObjParseError,
    StructuralParseError,
    EmptyGeometryError,
    PrematureEndOfInputError,
    MalformedFaceError,
    MalformedCornerError,
    OutOfBoundsReferenceError,
)
from .mesh import Mesh
from .convert import convert, convert_file
from .resort import sort_by_position
from .formatter import format_javascript, write_binary

__version__ = '1.0.0'
