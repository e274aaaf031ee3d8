from pytest_archon import archrule


def test_ports_are_independent() -> None:
    """
    Ports describe collaborators only.
    They must not import the toaster, strategies or adapters.
    """
    (
        archrule("ports_are_independent")
        .match("toastkit.ports*")
        .should_not_import("toastkit.toaster")
        .should_not_import("toastkit.strategy")
        .should_not_import("toastkit.memory*")
        .check("toastkit")
    )


def test_request_model_isolation() -> None:
    """
    The request model never depends on dispatch code or adapters.
    """
    (
        archrule("request_isolation")
        .match("toastkit.request")
        .should_not_import("toastkit.toaster")
        .should_not_import("toastkit.strategy")
        .should_not_import("toastkit.memory*")
        .check("toastkit")
    )


def test_styles_do_not_import_dispatch() -> None:
    """
    Styles are pure data and composition; dispatch code depends on them, not the reverse.
    """
    (
        archrule("styles_independent")
        .match("toastkit.style*")
        .should_not_import("toastkit.toaster")
        .should_not_import("toastkit.strategy")
        .should_not_import("toastkit.memory*")
        .check("toastkit")
    )


def test_adapters_do_not_import_toaster() -> None:
    """
    Memory adapters implement ports; they never reach back into the toaster.
    """
    (
        archrule("adapters_independent")
        .match("toastkit.memory*")
        .should_not_import("toastkit.toaster")
        .check("toastkit")
    )
