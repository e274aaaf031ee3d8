"""Tests for resource lookup."""

import sys

from toastkit import Found, MappingProcessContext, NotFound


def test_resolve_known_resource():
    """Test a registered id resolves to Found."""
    context = MappingProcessContext({1: "one"})

    assert context.resolve_text(1) == Found("one")


def test_resolve_unknown_resource():
    """Test an unregistered id resolves to NotFound."""
    assert MappingProcessContext().resolve_text(2) == NotFound(2)


def test_add_resource():
    """Test resources can be added after construction."""
    context = MappingProcessContext()
    context.add_resource(3, "three")

    assert context.resolve_text(3) == Found("three")


def test_debuggable_defaults_to_dev_mode():
    """Test debuggable follows Python's development mode when not given."""
    assert MappingProcessContext().is_debuggable() is bool(sys.flags.dev_mode)
    assert MappingProcessContext(debuggable=True).is_debuggable() is True
