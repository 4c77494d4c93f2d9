import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import cli

RUNTIME = b"\x00asm\x01\x00\x00\x00"


class TestCli(unittest.TestCase):

    def setUp(self):
        patcher = mock.patch("chainspec.runtime.WASM_BINARY", RUNTIME)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_build_spec_to_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "local.json")
            cli.main(["build-spec", "--chain", "local", "--output", path])
            with open(path) as f:
                doc = json.load(f)
        self.assertEqual(doc["id"], "local_testnet")
        self.assertEqual(len(doc["genesis"]["runtime"]["aura"]["authorities"]), 6)

    def test_build_spec_stdout(self):
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(["build-spec", "--compact"])
        doc = json.loads(out.getvalue())
        self.assertEqual(doc["id"], "dev")

    def test_unknown_chain_exits(self):
        with self.assertRaises(SystemExit) as cm:
            cli.main(["build-spec", "--chain", "nope"])
        self.assertEqual(cm.exception.code, 1)

    def test_missing_runtime_exits(self):
        with mock.patch("chainspec.runtime.WASM_BINARY", None):
            with self.assertRaises(SystemExit) as cm:
                cli.main(["build-spec"])
        self.assertEqual(cm.exception.code, 1)

    def test_inspect_key(self):
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(["inspect-key", "Alice"])
        self.assertIn("0x88dc3417d5058ec4b4503e0c12ea1a0a89be200fe98922423d4334014fa6b0ee", out.getvalue())
        self.assertIn("//Alice", out.getvalue())

    def test_inspect_invalid_label(self):
        with self.assertRaises(SystemExit) as cm:
            cli.main(["inspect-key", "Alice/soft"])
        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
