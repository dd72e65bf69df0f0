"""Packaging regression tests.

Tests that verify the source layout and the import boundary.
"""

from pathlib import Path


def test_src_layout():
    here = Path(__file__).resolve().parent
    repo_root = here.parent
    src_pkg = repo_root / "src" / "keysort"

    assert src_pkg.exists(), "keysort package should exist in src/"
    assert (src_pkg / "kernel").exists(), "keysort.kernel should exist in src/"
    assert (src_pkg / "_internal").exists(), "keysort._internal should exist"
    assert (repo_root / "pyproject.toml").exists()


def test_import_boundary():
    import keysort
    import keysort.kernel.walker  # noqa: F401

    # In dev mode it's "dev", in installed mode it's the project version
    assert keysort.__version__ in ("1.0.0", "dev")
