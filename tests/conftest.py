"""Test configuration for toastkit."""

import pytest

from toastkit import InMemoryStrategy, MappingProcessContext, Toaster, ToastStyle
from toastkit.style import Appearance

GREETING_ID = 0x7F010001


@pytest.fixture
def context():
    """Process context with one text resource, not debuggable."""
    return MappingProcessContext({GREETING_ID: "Hello from resources"}, debuggable=False)


@pytest.fixture
def strategy():
    return InMemoryStrategy()


@pytest.fixture
def toaster(context, strategy):
    """A toaster initialised with the in-memory strategy."""
    toaster = Toaster()
    toaster.init(context, strategy)
    return toaster


@pytest.fixture
def branded_style():
    """A base style with distinctive appearance fields."""
    return ToastStyle(
        appearance=Appearance(
            background_color="#FF336699",
            text_color="#FFFFFFFF",
            corner_radius=12.0,
            font="Inter",
        )
    )


@pytest.fixture
def greeting_id():
    """Resource id that resolves in the ``context`` fixture."""
    return GREETING_ID
