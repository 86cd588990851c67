"""Verify package imports work correctly."""


def test_import_optwalk() -> None:
    """Test that optwalk can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import optwalk

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert optwalk.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from optwalk import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names() -> None:
    """Everything in __all__ is importable from the top-level package."""
    import optwalk

    for name in optwalk.__all__:
        assert hasattr(optwalk, name), name
