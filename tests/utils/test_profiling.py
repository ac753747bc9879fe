import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filehasher.utils.profiling import (
    PROFILE_ENVIRONMENT_VARIABLE,
    generate_profile_filename,
    get_profile_dir,
    profile_main,
)


class ProfilingTest(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(PROFILE_ENVIRONMENT_VARIABLE, None)

    def test_get_profile_dir_when_not_set(self):
        self.assertIsNone(get_profile_dir())

    def test_get_profile_dir_when_set(self):
        os.environ[PROFILE_ENVIRONMENT_VARIABLE] = "/tmp/test_profile"

        result = get_profile_dir()

        self.assertEqual(Path("/tmp/test_profile"), result.parent)
        timestamp, pid = result.name.split('_')
        self.assertTrue(timestamp.isdigit())
        self.assertEqual(str(os.getpid()), pid)

    def test_generate_profile_filename_format(self):
        filename = generate_profile_filename("test")
        prefix, pid, seq = filename.split('_')

        self.assertEqual("test", prefix)
        self.assertEqual(str(os.getpid()), pid)
        self.assertTrue(seq.endswith(".prof"))
        self.assertTrue(seq[:-5].isdigit())

    def test_profile_main_disabled(self):
        @profile_main
        def add(a, b):
            return a + b

        self.assertEqual(5, add(2, 3))

    def test_profile_main_enabled(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            os.environ[PROFILE_ENVIRONMENT_VARIABLE] = tmpdir

            @profile_main
            def multiply(a, b):
                return a * b

            self.assertEqual(6, multiply(2, 3))

            profiles = list(Path(tmpdir).glob('*/main_*.prof'))
            self.assertEqual(1, len(profiles))
            self.assertGreater(profiles[0].stat().st_size, 0)
