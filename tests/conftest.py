import pytest

from colorhub import LinearRgb, Oklab, Xyz

from .samples import sample_linear_rgb, sample_oklab, sample_xyz


@pytest.fixture
def core_samples():
    """One list of instances per core space."""
    return {
        Xyz: [Xyz(*v) for v in sample_xyz],
        LinearRgb: [LinearRgb(*v) for v in sample_linear_rgb],
        Oklab: [Oklab(*v) for v in sample_oklab],
    }
