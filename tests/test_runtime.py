import os
import tempfile
import unittest
from unittest import mock

from chainspec.config import WASM_PATH_ENV
from chainspec.runtime import load_wasm_binary


class TestRuntimeSource(unittest.TestCase):

    def test_unset(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(load_wasm_binary())

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(load_wasm_binary(os.path.join(tmp, "runtime.wasm")))

    def test_reads_env_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "runtime.wasm")
            with open(path, "wb") as f:
                f.write(b"\x00asm")
            with mock.patch.dict(os.environ, {WASM_PATH_ENV: path}):
                self.assertEqual(load_wasm_binary(), b"\x00asm")


if __name__ == "__main__":
    unittest.main()
