"""
Tests for the command-line interface.
"""

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from link_harvester import cli
from link_harvester.config import Target
from link_harvester.logging_setup import log


class _CliTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.prefix = str(self.tmp / "site")

    def tearDown(self):
        for handler in list(log.handlers):
            handler.close()
            log.removeHandler(handler)
        self._tmp.cleanup()

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(list(argv))
        return code, out.getvalue()


class TestUsage(_CliTestCase):
    def test_missing_url(self):
        with patch.object(cli, "run_extractors") as run:
            code, out = self.run_cli("--output", self.prefix, "--robots")
        self.assertEqual(code, 0)
        self.assertIn("Website URL and output file name prefix are required.", out)
        self.assertIn("usage:", out)
        run.assert_not_called()

    def test_missing_output(self):
        with patch.object(cli, "run_extractors") as run:
            code, out = self.run_cli("--url", "https://example.com", "--links")
        self.assertEqual(code, 0)
        self.assertIn("are required", out)
        run.assert_not_called()

    def test_no_extractor_selected(self):
        with patch("link_harvester.runner.fetch") as fetch:
            code, out = self.run_cli("--url", "https://example.com",
                                     "--output", self.prefix)
        self.assertEqual(code, 0)
        self.assertIn("At least one of --robots, --sitemap, or --links", out)
        fetch.assert_not_called()
        self.assertEqual(list(self.tmp.iterdir()), [])

    def test_banner_printed(self):
        _, out = self.run_cli()
        self.assertIn("|_____|", out)

    def test_banner_suppressed(self):
        _, out = self.run_cli("--no-banner")
        self.assertNotIn("|_____|", out)


class TestDispatch(_CliTestCase):
    def test_selected_extractors_in_fixed_order(self):
        with patch.object(cli, "run_extractors", return_value={}) as run:
            code, _ = self.run_cli("--url", "https://example.com",
                                   "--output", self.prefix,
                                   "--links", "--robots")
        self.assertEqual(code, 0)
        target, kinds = run.call_args.args
        self.assertEqual(target, Target(url="https://example.com", output=self.prefix))
        self.assertEqual(kinds, ["robots", "links"])

    def test_url_passed_unchanged(self):
        with patch.object(cli, "run_extractors", return_value={}) as run:
            self.run_cli("--url", "https://example.com/", "--output", self.prefix,
                         "--sitemap")
        self.assertEqual(run.call_args.args[0].url, "https://example.com/")

    def test_no_verify_ssl(self):
        with patch.object(cli, "run_extractors", return_value={}) as run:
            self.run_cli("--url", "https://example.com", "--output", self.prefix,
                         "--robots", "--no-verify-ssl")
        self.assertFalse(run.call_args.args[0].verify_ssl)

    def test_exit_status_zero_on_failures(self):
        with patch.object(cli, "run_extractors",
                          return_value={"robots": None, "links": None}):
            code, _ = self.run_cli("--url", "https://example.com",
                                   "--output", self.prefix, "--robots", "--links")
        self.assertEqual(code, 0)

    def test_log_file(self):
        log_path = self.tmp / "logs" / "run.log"
        with patch.object(cli, "run_extractors", return_value={}):
            self.run_cli("--url", "https://example.com", "--output", self.prefix,
                         "--robots", "--log-file", str(log_path))
        for handler in log.handlers:
            handler.flush()
        self.assertIn("Running robots against https://example.com",
                      log_path.read_text(encoding="utf-8"))

    def test_end_to_end_with_fetch_patched(self):
        responses = {
            "https://example.com/robots.txt": b"Disallow: /private\n",
            "https://example.com": b'<a href="/about">About</a>',
        }
        with patch("link_harvester.runner.fetch",
                   side_effect=lambda session, url: responses[url]):
            code, out = self.run_cli("--url", "https://example.com",
                                     "--output", self.prefix,
                                     "--robots", "--links")
        self.assertEqual(code, 0)
        self.assertEqual((self.tmp / "site_robots.txt").read_text(encoding="utf-8"),
                         "https://example.com/private\n")
        self.assertEqual((self.tmp / "site_links.txt").read_text(encoding="utf-8"),
                         "/about\n")
        self.assertFalse((self.tmp / "site_sitemap.txt").exists())
        self.assertIn("saved in", out)


if __name__ == "__main__":
    unittest.main()
