import io
import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from .convert import convert, convert_file
from .errors import ObjParseError
from .formatter import format_javascript, write_binary

logger = logging.getLogger(__name__)


def _parse_arguments(argv):
    argument_parser = ArgumentParser(
        description='Reads a Wavefront Object file and produces vertex and index buffers suitable for rendering APIs.',
    )
    argument_parser.add_argument('input', nargs='?', type=Path, help='Wavefront Object file to read (default: stdin)')
    argument_parser.add_argument('output', nargs='?', type=Path, help='File to write the buffers into (default: stdout)')
    argument_parser.add_argument('--no-texture', action='store_true', dest='disable_texture', help='Omit texture coordinates from the vertex buffer')
    argument_parser.add_argument('--no-normal', action='store_true', dest='disable_normal', help='Omit normals from the vertex buffer')
    argument_parser.add_argument('--sort', action='store_true', dest='sort_by_position', help='Sort vertices by Z, then X position')
    argument_parser.add_argument('--precision', type=int, default=5, help='Significant digits of vertex values')
    argument_parser.add_argument('--indent', type=int, default=4, help='Number of spaces to indent array rows with')
    argument_parser.add_argument('--tabs', action='store_true', dest='use_tabs', help='Indent array rows with a tab')
    argument_parser.add_argument('--binary', action='store_true', help='Write little-endian binary buffers instead of JavaScript')
    argument_parser.add_argument('-v', '--verbose', action='store_true', help='Log conversion details')
    return argument_parser.parse_args(argv)


def _is_std(path) -> bool:
    return path is None or str(path) == '-'


def _write(path, data):
    if _is_std(path):
        if isinstance(data, bytes):
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            sys.stdout.write(data)
            sys.stdout.flush()
        return
    mode = 'wb' if isinstance(data, bytes) else 'w'
    with open(path.resolve(), mode) as file:
        file.write(data)


def main(argv=None) -> int:
    args = _parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s'
    )
    options = dict(
        disable_texture=args.disable_texture,
        disable_normal=args.disable_normal,
        sort_by_position=args.sort_by_position
    )
    try:
        if _is_std(args.input):
            sys.stdin.reconfigure(encoding='latin-1')
            mesh = convert(sys.stdin, **options)
        else:
            mesh = convert_file(args.input, **options)
    except ObjParseError as e:
        logger.error('%s', e)
        return 1
    except OSError as e:
        logger.error('Could not read %s: %s', args.input, e.strerror)
        return 1
    if mesh.vertex_count <= 0:
        logger.error('No geometry produced')
        return 1
    logger.debug('Converted %r', mesh)

    if args.binary:
        buffer = io.BytesIO()
        write_binary(mesh, buffer)
        data = buffer.getvalue()
    else:
        data = format_javascript(mesh, precision=args.precision, indent=args.indent, use_tabs=args.use_tabs)
    try:
        _write(args.output, data)
    except OSError as e:
        logger.error('Could not write %s: %s', args.output, e.strerror)
        return 1
    return 0


def _main():
    sys.exit(main())


if __name__ == '__main__':
    _main()
