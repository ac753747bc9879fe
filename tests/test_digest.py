import errno
import os
import string
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filehasher.digest import (
    DIGEST_SIZE,
    FailureCause,
    HashResult,
    classify_os_error,
    digest,
    digest_bytes,
    hash_file,
)

from .test_utils import ABC_SHA512, EMPTY_SHA512, reference_sha512


class DigestTest(unittest.TestCase):
    def test_empty_input(self):
        self.assertEqual(EMPTY_SHA512, digest(b''))

    def test_known_vector(self):
        self.assertEqual(ABC_SHA512, digest(b'abc'))

    def test_format(self):
        for data in [b'', b'\0', b'hello world', os.urandom(1000)]:
            value = digest(data)
            self.assertEqual(128, len(value))
            self.assertTrue(set(value) <= set(string.hexdigits.lower()), value)

    def test_deterministic(self):
        data = os.urandom(4096)
        self.assertEqual(digest(data), digest(data))

    def test_matches_reference(self):
        data = b'Content of a fixture file\n' * 100
        self.assertEqual(reference_sha512(data), digest(data))

    def test_digest_bytes_size(self):
        raw = digest_bytes(b'abc')
        self.assertEqual(DIGEST_SIZE, len(raw))
        self.assertEqual(ABC_SHA512, raw.hex())


class ClassifyOsErrorTest(unittest.TestCase):
    def test_categories(self):
        self.assertEqual(FailureCause.PERMISSION, classify_os_error(PermissionError(errno.EACCES, 'denied')))
        self.assertEqual(FailureCause.NOT_FOUND, classify_os_error(FileNotFoundError(errno.ENOENT, 'gone')))
        self.assertEqual(FailureCause.NOT_A_DIRECTORY, classify_os_error(NotADirectoryError(errno.ENOTDIR, 'x')))
        self.assertEqual(FailureCause.IO_ERROR, classify_os_error(OSError(errno.EIO, 'I/O error')))


class HashFileTest(unittest.TestCase):
    def test_hash_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'Testfile.txt'
            path.write_bytes(b'abc')

            result = hash_file(path)

            self.assertTrue(result.ok)
            self.assertEqual(path, result.path)
            self.assertEqual(ABC_SHA512, result.digest)
            self.assertIsNone(result.cause)

    def test_accepts_string_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'empty.txt'
            path.write_bytes(b'')

            self.assertEqual(EMPTY_SHA512, hash_file(str(path)).digest)

    def test_identical_content_same_digest(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            a = Path(tmpdir) / 'Testfile.txt'
            b = Path(tmpdir) / 'Test File.txt'
            a.write_bytes(b'same content')
            b.write_bytes(b'same content')

            self.assertEqual(hash_file(a).digest, hash_file(b).digest)

    def test_umlaut_file_name(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'Testfile with Ümläuts.txt'
            path.write_bytes(b'abc')

            self.assertEqual(ABC_SHA512, hash_file(path).digest)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'vanished.txt'

            with self.assertLogs('filehasher.digest', level='WARNING'):
                result = hash_file(path)

            self.assertFalse(result.ok)
            self.assertIsNone(result.digest)
            self.assertEqual(FailureCause.NOT_FOUND, result.cause)
            self.assertIsNotNone(result.message)

    def test_directory_is_an_io_failure(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertLogs('filehasher.digest', level='WARNING'):
                result = hash_file(tmpdir)

            self.assertFalse(result.ok)
            self.assertIn(result.cause, (FailureCause.IO_ERROR, FailureCause.PERMISSION))

    def test_permission_denied(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'secret.txt'
            path.write_bytes(b'secret')

            with mock.patch.object(Path, 'read_bytes', side_effect=PermissionError(errno.EACCES, 'denied')):
                with self.assertLogs('filehasher.digest', level='WARNING'):
                    result = hash_file(path)

            self.assertEqual(FailureCause.PERMISSION, result.cause)

    def test_algorithm_unavailable(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'file.txt'
            path.write_bytes(b'abc')

            with mock.patch('filehasher.digest.hashlib.new', side_effect=ValueError('unsupported hash type')):
                with self.assertLogs('filehasher.digest', level='WARNING'):
                    result = hash_file(path)

            self.assertEqual(FailureCause.ALGORITHM_UNAVAILABLE, result.cause)
            self.assertEqual('unsupported hash type', result.message)

    def test_result_is_immutable(self):
        result = HashResult(Path('a'), digest=EMPTY_SHA512)
        with self.assertRaises(AttributeError):
            result.digest = ABC_SHA512
