"""Unit tests for environment file loading."""

import os
import tempfile
import unittest
from unittest import mock

from vortex.environment import read_environment_file
from vortex.errors import EnvironmentFileError


class TestEnvironmentFile(unittest.TestCase):
    """Test reading dotenv files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, ".env")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, content: str) -> None:
        with open(self.path, "w") as f:
            f.write(content)

    def test_sets_new_variables(self):
        """Test that variables are applied to the environment."""
        self.write('VORTEX_TEST_PORT=8080\nVORTEX_TEST_NAME="a b"\n')
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("VORTEX_TEST_PORT", None)
            os.environ.pop("VORTEX_TEST_NAME", None)
            applied = read_environment_file(self.path, True)
            self.assertEqual("8080", os.environ["VORTEX_TEST_PORT"])
            self.assertEqual("a b", os.environ["VORTEX_TEST_NAME"])
        self.assertEqual(
            {"VORTEX_TEST_PORT": "8080", "VORTEX_TEST_NAME": "a b"}, applied
        )

    def test_existing_variables_win(self):
        """Test that variables already set are left alone."""
        self.write("VORTEX_TEST_EXISTING=new\nVORTEX_TEST_OTHER=1\n")
        with mock.patch.dict(os.environ, {"VORTEX_TEST_EXISTING": "old"}):
            os.environ.pop("VORTEX_TEST_OTHER", None)
            applied = read_environment_file(self.path, True)
            self.assertEqual("old", os.environ["VORTEX_TEST_EXISTING"])
        self.assertEqual({"VORTEX_TEST_OTHER": "1"}, applied)

    def test_keys_without_value(self):
        """Test that bare keys are skipped."""
        self.write("VORTEX_TEST_BARE\n")
        with mock.patch.dict(os.environ, {}):
            os.environ.pop("VORTEX_TEST_BARE", None)
            self.assertEqual({}, read_environment_file(self.path, True))
            self.assertNotIn("VORTEX_TEST_BARE", os.environ)

    def test_missing_file_optional(self):
        """Test that a missing optional file is ignored."""
        self.assertEqual({}, read_environment_file(self.path, False))

    def test_missing_file_required(self):
        """Test that a missing required file is reported."""
        with self.assertRaises(EnvironmentFileError):
            read_environment_file(self.path, True)


if __name__ == "__main__":
    unittest.main()
