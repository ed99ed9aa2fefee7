"""Checks that pyproject.toml declares every library the package imports."""

import unittest
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@unittest.skipUnless(PYPROJECT.exists(), "pyproject.toml not available")
class TestDeclaredDependencies(unittest.TestCase):

    def test_direct_imports_are_declared(self):
        text = PYPROJECT.read_text(encoding="utf-8").lower()
        for dist in ("flask", "markupsafe", "python-dotenv"):
            self.assertIn(f'"{dist}', text, dist)


if __name__ == "__main__":
    unittest.main()
