"""Command line front end."""

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

import cli

from sample_images import gradient_image


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.image_path = self.tmp / "gradient.png"
        gradient_image(40, 30).save(self.image_path)
        # Keep the user's real defaults file out of the tests
        self.config_args = ["--config", str(self.tmp / "pixify.json")]

    def tearDown(self):
        self._tmp.cleanup()

    def run_cli(self, *args):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = cli.main([*args, *self.config_args])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_query_mode_prints_json(self):
        code, out, _ = self.run_cli(str(self.image_path), "--cells", "8", "--colors", "4")
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual((data["rows"], data["columns"]), (6, 8))
        self.assertLessEqual(len(data["palette"]), 4)
        self.assertEqual(sum(e["usage_count"] for e in data["palette"]), 48)

    def test_json_file(self):
        target = self.tmp / "out.json"
        code, out, _ = self.run_cli(str(self.image_path), "-c", "4", "--json", str(target))
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertEqual(json.loads(target.read_text())["filename"], "gradient.png")

    def test_export_mode(self):
        export_dir = self.tmp / "exports"
        code, _, _ = self.run_cli(
            str(self.image_path), "--cells", "5", "--method", "octree", "--export", str(export_dir)
        )
        self.assertEqual(code, 0)
        self.assertTrue((export_dir / "gradient.png").exists())

    def test_no_reduction(self):
        code, out, _ = self.run_cli(str(self.image_path), "--cells", "4", "--method", "none")
        self.assertEqual(code, 0)
        self.assertIsNone(json.loads(out)["config"]["palette_method"])

    def test_invalid_color_count(self):
        code, out, err = self.run_cli(str(self.image_path), "--colors", "300")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Invalid value in 'color_count'", err)

    def test_config_file_with_wrong_type(self):
        (self.tmp / "pixify.json").write_text(json.dumps({"color_count": "12"}))
        code, out, err = self.run_cli(str(self.image_path), "--cells", "8")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Invalid value in 'color_count'. Value should be an integer", err)

    def test_export_directory_not_writable(self):
        # A regular file where the export directory should be
        blocker = self.tmp / "exports"
        blocker.write_text("")
        code, _, err = self.run_cli(str(self.image_path), "--cells", "5", "--export", str(blocker))
        self.assertEqual(code, 1)
        self.assertIn("Could not export pattern", err)

    def test_unreadable_image(self):
        bad = self.tmp / "bad.png"
        bad.write_bytes(b"not really a png")
        code, _, err = self.run_cli(str(bad))
        self.assertEqual(code, 2)
        self.assertIn("Failed to load image", err)


if __name__ == "__main__":
    unittest.main()
