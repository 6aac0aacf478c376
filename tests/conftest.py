import numpy as np
import pytest


# =============================================================================
# Linear simplex elements in reference coordinates
# =============================================================================


@pytest.fixture
def bar2():
    """2-node bar of unit length: (nodes × 1) coordinates and 1 × 2 gradients."""
    X = np.array([[0.0], [1.0]])
    G = np.array([[-1.0, 1.0]])
    return X, G


@pytest.fixture
def tri3():
    """Linear triangle on the unit right triangle."""
    X = np.array(
        [
            [0.0, 0.0],
            [1.0, 0.0],
            [0.0, 1.0],
        ]
    )
    G = np.array(
        [
            [-1.0, 1.0, 0.0],  # dN/dX
            [-1.0, 0.0, 1.0],  # dN/dY
        ]
    )
    return X, G


@pytest.fixture
def tet4():
    """Linear tetrahedron on the unit corner tetrahedron."""
    X = np.array(
        [
            [0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )
    G = np.array(
        [
            [-1.0, 1.0, 0.0, 0.0],  # dN/dX
            [-1.0, 0.0, 1.0, 0.0],  # dN/dY
            [-1.0, 0.0, 0.0, 1.0],  # dN/dZ
        ]
    )
    return X, G


@pytest.fixture
def rng():
    return np.random.default_rng(20231)
