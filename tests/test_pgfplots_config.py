from __future__ import annotations

import unittest

from pgfplots import CompilerSettings, resolve_compiler_settings


class CompilerSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = resolve_compiler_settings(environ={})
        self.assertEqual(settings, CompilerSettings())
        self.assertEqual(settings.engine, "pdflatex")
        self.assertEqual(settings.timeout_s, 60.0)
        self.assertIsNone(settings.tmp_dir)

    def test_environment_variables(self) -> None:
        settings = resolve_compiler_settings(
            environ={
                "PGFPLOTS_ENGINE": "Tectonic",
                "PGFPLOTS_PDFLATEX": "/opt/tex/bin/pdflatex",
                "PGFPLOTS_COMPILE_TIMEOUT": "5",
                "PGFPLOTS_TMPDIR": "/tmp/figures",
                "PGFPLOTS_TECTONIC": "  ",
            }
        )
        self.assertEqual(settings.engine, "tectonic")
        self.assertEqual(settings.pdflatex, "/opt/tex/bin/pdflatex")
        self.assertEqual(settings.tectonic, "tectonic")
        self.assertEqual(settings.timeout_s, 5.0)
        self.assertEqual(settings.tmp_dir, "/tmp/figures")

    def test_overrides_win_over_environment(self) -> None:
        settings = resolve_compiler_settings(
            {"timeout_s": 2.5},
            environ={"PGFPLOTS_COMPILE_TIMEOUT": "5"},
        )
        self.assertEqual(settings.timeout_s, 2.5)

    def test_invalid_settings_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            resolve_compiler_settings({"colour": "red"}, environ={})
        with self.assertRaises(ValueError):
            resolve_compiler_settings({"engine": "lualatex"}, environ={})
        with self.assertRaises(ValueError):
            resolve_compiler_settings({"timeout_s": 0}, environ={})
        with self.assertRaises(ValueError):
            resolve_compiler_settings({"pdflatex": ""}, environ={})
        with self.assertRaises(ValueError):
            resolve_compiler_settings(environ={"PGFPLOTS_COMPILE_TIMEOUT": "soon"})


if __name__ == "__main__":
    unittest.main()
