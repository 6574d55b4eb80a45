"""
File handle tests.
"""

import os
import unittest

from ptfs.filesystem import MemFileSystem
from ptfs.interfaces import File, O_RDONLY, O_WRONLY, O_RDWR, O_CREAT, O_APPEND
from ptfs.exceptions import (
    FileClosedError,
    InvalidArgumentError,
    IsADirectoryError,
    NotADirectoryError,
    PermissionDeniedError,
)


class TestMemFile(unittest.TestCase):
    """Test reading, writing and positioning through a handle."""

    def setUp(self):
        self.fs = MemFileSystem()
        self.f = self.fs.create('/data.bin')

    def tearDown(self):
        if not self.f.closed:
            self.f.close()

    def test_implements_file(self):
        self.assertIsInstance(self.f, File)
        self.assertEqual(self.f.name(), '/data.bin')

    def test_write_then_read(self):
        self.assertEqual(self.f.write(b'Hello, World!'), 13)
        self.assertEqual(self.f.seek(0), 0)
        self.assertEqual(self.f.read(5), b'Hello')
        self.assertEqual(self.f.read(), b', World!')
        self.assertEqual(self.f.read(), b'')

    def test_write_string(self):
        self.assertEqual(self.f.write_string('héllo'), len('héllo'.encode('utf-8')))
        self.f.seek(0)
        self.assertEqual(self.f.read().decode('utf-8'), 'héllo')

    def test_read_at_does_not_move_cursor(self):
        self.f.write(b'0123456789')
        self.f.seek(2)

        self.assertEqual(self.f.read_at(3, 5), b'567')
        self.assertEqual(self.f.read(2), b'23')
        self.assertEqual(self.f.read_at(10, 8), b'89')

        with self.assertRaises(InvalidArgumentError):
            self.f.read_at(1, -1)

    def test_write_at(self):
        self.f.write(b'aaaa')
        self.assertEqual(self.f.write_at(b'bb', 1), 2)
        self.assertEqual(self.f.read_at(4, 0), b'abba')

        self.f.write_at(b'z', 6)
        self.assertEqual(self.f.read_at(10, 0), b'abba\x00\x00z')

        with self.assertRaises(InvalidArgumentError):
            self.f.write_at(b'x', -1)

    def test_seek(self):
        self.f.write(b'0123456789')

        self.assertEqual(self.f.seek(3, os.SEEK_SET), 3)
        self.assertEqual(self.f.seek(2, os.SEEK_CUR), 5)
        self.assertEqual(self.f.seek(-1, os.SEEK_END), 9)
        self.assertEqual(self.f.read(), b'9')

        with self.assertRaises(InvalidArgumentError):
            self.f.seek(-20, os.SEEK_END)
        with self.assertRaises(InvalidArgumentError):
            self.f.seek(0, 7)

    def test_seek_past_end_then_write(self):
        self.f.write(b'ab')
        self.f.seek(4)
        self.f.write(b'c')
        self.assertEqual(self.f.read_at(10, 0), b'ab\x00\x00c')

    def test_truncate(self):
        self.f.write(b'0123456789')
        self.f.truncate(3)
        self.assertEqual(self.f.stat().size, 3)

        with self.assertRaises(InvalidArgumentError):
            self.f.truncate(-1)

    def test_stat(self):
        self.f.write(b'abc')
        info = self.f.stat()
        self.assertEqual(info.name, 'data.bin')
        self.assertEqual(info.size, 3)
        self.assertTrue(info.is_regular())

    def test_sync(self):
        self.f.write(b'abc')
        self.f.sync()
        self.assertEqual(self.fs.stat('/data.bin').size, 3)

    def test_readdir_on_file(self):
        with self.assertRaises(NotADirectoryError):
            self.f.readdir()

    def test_closed_handle(self):
        self.f.close()
        self.assertTrue(self.f.closed)

        operations = [
            lambda: self.f.read(),
            lambda: self.f.read_at(1, 0),
            lambda: self.f.write(b'x'),
            lambda: self.f.write_at(b'x', 0),
            lambda: self.f.seek(0),
            lambda: self.f.truncate(0),
            lambda: self.f.sync(),
            lambda: self.f.stat(),
            lambda: self.f.readdir(),
            lambda: self.f.close(),
        ]
        for i, op in enumerate(operations):
            with self.subTest(operation=i):
                with self.assertRaises(FileClosedError):
                    op()

    def test_context_manager_closes(self):
        with self.fs.open('/data.bin') as f:
            self.assertFalse(f.closed)
        self.assertTrue(f.closed)

    def test_repr(self):
        self.assertIn('/data.bin', repr(self.f))
        self.f.close()
        self.assertIn('closed', repr(self.f))


class TestAccessModes(unittest.TestCase):

    def setUp(self):
        self.fs = MemFileSystem()
        with self.fs.create('/f.txt') as f:
            f.write(b'abc')

    def test_read_only_handle(self):
        with self.fs.open_file('/f.txt', O_RDONLY, 0) as f:
            self.assertEqual(f.read(), b'abc')
            with self.assertRaises(PermissionDeniedError):
                f.write(b'x')
            with self.assertRaises(PermissionDeniedError):
                f.truncate(0)

    def test_write_only_handle(self):
        with self.fs.open_file('/f.txt', O_WRONLY, 0) as f:
            f.write(b'X')
            with self.assertRaises(PermissionDeniedError):
                f.read()
        with self.fs.open('/f.txt') as f:
            self.assertEqual(f.read(), b'Xbc')

    def test_append(self):
        with self.fs.open_file('/f.txt', O_WRONLY | O_APPEND, 0) as f:
            f.seek(0)
            f.write(b'def')
        with self.fs.open('/f.txt') as f:
            self.assertEqual(f.read(), b'abcdef')

    def test_append_creates(self):
        with self.fs.open_file('/log.txt', O_RDWR | O_CREAT | O_APPEND, 0o644) as f:
            f.write(b'one\n')
            f.write(b'two\n')
            f.seek(0)
            self.assertEqual(f.read(), b'one\ntwo\n')

    def test_shared_inode_between_handles(self):
        reader = self.fs.open('/f.txt')
        with self.fs.open_file('/f.txt', O_WRONLY | O_APPEND, 0) as writer:
            writer.write(b'!')
        self.assertEqual(reader.read(), b'abc!')
        reader.close()


class TestDirectoryHandle(unittest.TestCase):

    def setUp(self):
        self.fs = MemFileSystem()
        self.fs.mkdir('/dir', 0o755)
        for name in ('one', 'two', 'three'):
            self.fs.create('/dir/' + name).close()

    def test_read_on_directory(self):
        with self.fs.open('/dir') as d:
            with self.assertRaises(IsADirectoryError):
                d.read()

    def test_readdir_batches(self):
        with self.fs.open('/dir') as d:
            first = d.readdir(2)
            rest = d.readdir(5)
            self.assertEqual(d.readdir(1), [])

        self.assertEqual([e.name for e in first], ['one', 'three'])
        self.assertEqual([e.name for e in rest], ['two'])

    def test_readdir_non_positive_reads_all(self):
        with self.fs.open('/dir') as d:
            self.assertEqual(len(d.readdir(0)), 3)
            self.assertEqual(d.readdir(0), [])

    def test_listing_is_snapshot(self):
        with self.fs.open('/dir') as d:
            self.fs.create('/dir/four').close()
            self.assertEqual(d.readdirnames(), ['one', 'three', 'two'])

    def test_stat(self):
        with self.fs.open('/dir') as d:
            info = d.stat()
        self.assertEqual(info.name, 'dir')
        self.assertTrue(info.is_dir())


if __name__ == '__main__':
    unittest.main()
