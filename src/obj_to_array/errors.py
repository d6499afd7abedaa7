from typing import Optional


class ObjParseError(RuntimeError):
    def __init__(self, message: str, line: Optional[str] = None):
        self.message = message
        self.line = line
        if line is not None:
            super().__init__('%s: %s' % (message, line))
        else:
            super().__init__(message)


class StructuralParseError(ObjParseError):
    pass


class EmptyGeometryError(ObjParseError):
    pass


class PrematureEndOfInputError(ObjParseError):
    pass


class MalformedFaceError(ObjParseError):
    pass


class MalformedCornerError(ObjParseError):
    pass


class OutOfBoundsReferenceError(ObjParseError):
    pass
