import io
import os
import tempfile
import unittest
from unittest import mock

import numpy

from obj_to_array.main import main

QUAD = """\
v 0 0 0
v 1 0 0
v 0 1 0
v 1 1 0
vn 0 0 1
f 1//1 2//1 3//1 4//1
"""


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.input = os.path.join(self.tmpdir.name, 'quad.obj')
        self.output = os.path.join(self.tmpdir.name, 'quad.js')
        with open(self.input, 'w') as f:
            f.write(QUAD)

    def tearDown(self):
        self.tmpdir.cleanup()

    def read_output(self, mode='r'):
        with open(self.output, mode) as f:
            return f.read()

    def test_javascript_output(self):
        self.assertEqual(main([self.input, self.output]), 0)
        text = self.read_output()
        self.assertTrue(text.startswith('let vbo = [\n    0, 0, 0, 0, 0, 1,\n'))
        self.assertIn('let ebo = [\n    0, 1, 2,\n    0, 2, 3,\n];\n', text)

    def test_flags(self):
        self.assertEqual(main([self.input, self.output, '--no-normal', '--indent', '1']), 0)
        self.assertTrue(self.read_output().startswith('let vbo = [\n 0, 0, 0,\n 1, 0, 0,\n'))

    def test_sorted_output(self):
        self.assertEqual(main([self.input, self.output, '--sort', '--no-normal']), 0)
        self.assertIn('let ebo = [\n    0, 2, 1,\n    0, 1, 3,\n];', self.read_output())

    def test_binary_output(self):
        self.assertEqual(main([self.input, self.output, '--binary']), 0)
        data = self.read_output('rb')
        header = numpy.frombuffer(data[:12], dtype='<u4').tolist()
        self.assertEqual(header, [6, 24, 6])
        self.assertEqual(len(data), 12 + 24 * 4 + 6 * 4)

    def test_failure_writes_nothing(self):
        with open(self.input, 'w') as f:
            f.write(QUAD.replace('4//1', '5//1'))
        with self.assertLogs('obj_to_array.main', level='ERROR'):
            self.assertEqual(main([self.input, self.output]), 1)
        self.assertFalse(os.path.exists(self.output))

    def test_missing_input(self):
        with self.assertLogs('obj_to_array.main', level='ERROR'):
            self.assertEqual(main([os.path.join(self.tmpdir.name, 'missing.obj'), self.output]), 1)
        self.assertFalse(os.path.exists(self.output))

    def test_no_faces(self):
        with open(self.input, 'w') as f:
            f.write('v 0 0 0\ng empty\n')
        with self.assertLogs('obj_to_array.main', level='ERROR'):
            self.assertEqual(main([self.input, self.output]), 1)


    def test_latin1_comment(self):
        with open(self.input, 'wb') as f:
            f.write(b'# Cr\xe9\xe9 par Blender\n' + QUAD.encode('ascii'))
        self.assertEqual(main([self.input, self.output]), 0)
        self.assertIn('let ebo = [\n    0, 1, 2,\n    0, 2, 3,\n];\n', self.read_output())


class TestMainStandardStreams(unittest.TestCase):

    def run_main(self, data, argv):
        stdin = io.TextIOWrapper(io.BytesIO(data))
        stdout = io.TextIOWrapper(io.BytesIO())
        with mock.patch('sys.stdin', stdin), mock.patch('sys.stdout', stdout):
            status = main(argv)
        stdout.flush()
        return status, stdout.buffer.getvalue()

    def test_text_output(self):
        status, data = self.run_main(b'# \xa9 2024\n' + QUAD.encode('ascii'), ['-', '-'])
        self.assertEqual(status, 0)
        text = data.decode('ascii')
        self.assertTrue(text.startswith('let vbo = [\n    0, 0, 0, 0, 0, 1,\n'))
        self.assertIn('let ebo = [\n    0, 1, 2,\n    0, 2, 3,\n];\n', text)

    def test_default_streams(self):
        status, data = self.run_main(QUAD.encode('ascii'), ['--no-normal'])
        self.assertEqual(status, 0)
        self.assertTrue(data.startswith(b'let vbo = [\n    0, 0, 0,\n    1, 0, 0,\n'))

    def test_binary_output(self):
        status, data = self.run_main(QUAD.encode('ascii'), ['-', '-', '--binary'])
        self.assertEqual(status, 0)
        self.assertEqual(numpy.frombuffer(data[:12], dtype='<u4').tolist(), [6, 24, 6])
        self.assertEqual(numpy.frombuffer(data[-24:], dtype='<u4').tolist(), [0, 1, 2, 0, 2, 3])

    def test_failure_writes_nothing(self):
        with self.assertLogs('obj_to_array.main', level='ERROR'):
            status, data = self.run_main(b'v 0 0 0\nf 1 2 3\n', ['-', '-'])
        self.assertEqual(status, 1)
        self.assertEqual(data, b'')


if __name__ == '__main__':
    unittest.main()
