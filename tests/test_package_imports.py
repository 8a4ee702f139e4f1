"""
Package Import Tests - Verify all exports are working correctly.

This test module ensures:
1. All __all__ exports are importable
2. No circular import issues
3. Version is correct

Run with: uv run pytest tests/test_package_imports.py -v
"""

from __future__ import annotations


class TestPackageImports:
    """Test all package imports work correctly."""

    def test_version(self):
        """Version should be a valid semver string."""
        import quickhttp

        version = quickhttp.__version__
        assert version is not None
        parts = version.split(".")
        assert len(parts) >= 2
        assert all(p.isdigit() for p in parts[:2])

    def test_all_exports_importable(self):
        """All items in __all__ should be importable."""
        import quickhttp

        for name in quickhttp.__all__:
            obj = getattr(quickhttp, name, None)
            assert obj is not None, f"Export '{name}' is None or missing"

    def test_verb_helpers_are_callable(self):
        """Every verb helper should be exposed at package level."""
        from quickhttp import delete, get, head, patch, post, put

        for helper in (get, post, put, delete, patch, head):
            assert callable(helper)

    def test_layer_reexports_match(self):
        """Package-level names should be the same objects as in their layers."""
        import quickhttp
        from quickhttp.core import TransportError
        from quickhttp.infrastructure import RequestExecutor

        assert quickhttp.TransportError is TransportError
        assert quickhttp.RequestExecutor is RequestExecutor

    def test_user_agent_uses_version(self):
        """Default User-Agent should carry the package version."""
        import quickhttp

        assert quickhttp.get_client_config()["user_agent"] == f"quickhttp/{quickhttp.__version__}"
