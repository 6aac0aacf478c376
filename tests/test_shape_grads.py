"""Tests for the Total Lagrangian strain-displacement matrices."""

import numpy as np
import pytest

from fem_finitedef.kinematics import (
    KinematicsContractError,
    SpatialRank,
    eval_deformation_gradient,
    get_1d_shape_grads_tl,
    get_2d_shape_grads_tl,
    get_3d_shape_grads_tl,
    get_green_lagrange_strain,
    get_shape_grads_tl_func,
    strain_count,
)

BUILDERS = {1: get_1d_shape_grads_tl, 2: get_2d_shape_grads_tl, 3: get_3d_shape_grads_tl}


def numerical_strain_derivative(u: np.ndarray, G: np.ndarray, h: float = 1e-6) -> np.ndarray:
    """Central-difference derivative of the Voigt strain w.r.t. nodal displacements."""
    n_dofs = u.shape[0]
    rank = G.shape[0]
    dE = np.zeros((strain_count(rank), n_dofs))
    for k in range(n_dofs):
        du = np.zeros(n_dofs)
        du[k] = h
        eps_plus = get_green_lagrange_strain(eval_deformation_gradient(u + du, G))
        eps_minus = get_green_lagrange_strain(eval_deformation_gradient(u - du, G))
        dE[:, k] = (eps_plus - eps_minus) / (2 * h)
    return dE


def linear_b_matrix(G: np.ndarray) -> np.ndarray:
    """Small-strain B-matrix with the same row layout as the TL builders."""
    rank, n_nodes = G.shape
    B = np.zeros((strain_count(rank), rank * n_nodes))
    for i in range(n_nodes):
        col = rank * i
        if rank == 1:
            B[0, col] = G[0, i]
        elif rank == 2:
            B[0, col] = G[0, i]  # ε_xx = ∂u/∂x
            B[1, col + 1] = G[1, i]  # ε_yy = ∂v/∂y
            B[3, col] = G[1, i]  # γ_xy = ∂u/∂y + ∂v/∂x
            B[3, col + 1] = G[0, i]
        else:
            B[0, col] = G[0, i]
            B[1, col + 1] = G[1, i]
            B[2, col + 2] = G[2, i]
            B[3, col] = G[1, i]
            B[3, col + 1] = G[0, i]
            B[4, col + 1] = G[2, i]
            B[4, col + 2] = G[1, i]
            B[5, col] = G[2, i]
            B[5, col + 2] = G[0, i]
    return B


class TestShapeGradsShapes:
    @pytest.mark.parametrize("rank", [1, 2, 3])
    @pytest.mark.parametrize("n_nodes", [1, 2, 4, 8, 27])
    def test_size_invariants(self, rng, rank, n_nodes):
        G = rng.standard_normal((rank, n_nodes))
        F = np.eye(rank) + 0.1 * rng.standard_normal((rank, rank))
        B = BUILDERS[rank](G, F)
        assert B.shape == (strain_count(rank), rank * n_nodes)

    def test_plane_zz_row_is_zero(self, rng):
        G = rng.standard_normal((2, 4))
        F = np.eye(2) + 0.3 * rng.standard_normal((2, 2))
        B = get_2d_shape_grads_tl(G, F)
        assert not np.any(B[2])

    @pytest.mark.parametrize("rank", [1, 2, 3])
    def test_out_buffer_is_fully_overwritten(self, rng, rank):
        G = rng.standard_normal((rank, 3))
        F = np.eye(rank) + 0.1 * rng.standard_normal((rank, rank))
        out = np.full((strain_count(rank), 3 * rank), np.nan)
        B = BUILDERS[rank](G, F, out=out)
        assert B is out
        assert np.array_equal(out, BUILDERS[rank](G, F))


class TestShapeGradsValues:
    def test_1d_is_F_times_G(self, bar2):
        _, G = bar2
        B = get_1d_shape_grads_tl(G, np.array([[1.1]]))
        assert np.allclose(B, [[-1.1, 1.1]])

    def test_2d_single_node_identity_reduces_to_linear(self):
        """With F = I the nonlinear B-matrix is the small-strain B-matrix."""
        G = np.array([[0.3], [-0.7]])
        B = get_2d_shape_grads_tl(G, np.eye(2))
        expected = np.array(
            [
                [0.3, 0.0],
                [0.0, -0.7],
                [0.0, 0.0],
                [-0.7, 0.3],
            ]
        )
        assert np.array_equal(B, expected)

    @pytest.mark.parametrize("rank", [1, 2, 3])
    def test_zero_displacement_reduces_to_linear(self, rng, rank):
        G = rng.standard_normal((rank, 6))
        F = eval_deformation_gradient(np.zeros(6 * rank), G)
        assert np.array_equal(BUILDERS[rank](G, F), linear_b_matrix(G))

    def test_2d_entries(self):
        G = np.array([[1.0, 2.0], [3.0, 4.0]])
        F = np.array([[1.1, 0.2], [-0.3, 0.9]])
        B = get_2d_shape_grads_tl(G, F)
        # node 1: dN/dx = 2, dN/dy = 4
        assert B[0, 2] == pytest.approx(1.1 * 2.0)
        assert B[0, 3] == pytest.approx(-0.3 * 2.0)
        assert B[1, 2] == pytest.approx(0.2 * 4.0)
        assert B[1, 3] == pytest.approx(0.9 * 4.0)
        assert B[3, 2] == pytest.approx(1.1 * 4.0 + 0.2 * 2.0)
        assert B[3, 3] == pytest.approx(-0.3 * 4.0 + 0.9 * 2.0)

    def test_3d_shear_row_pairs(self, rng):
        G = rng.standard_normal((3, 2))
        F = np.eye(3) + 0.2 * rng.standard_normal((3, 3))
        B = get_3d_shape_grads_tl(G, F)
        n, d = 1, 2
        col = 3 * n + d
        for row, (a, b) in zip((3, 4, 5), ((0, 1), (1, 2), (2, 0))):
            assert B[row, col] == pytest.approx(F[d, a] * G[b, n] + F[d, b] * G[a, n])

    @pytest.mark.parametrize("rank", [1, 2, 3])
    def test_matches_strain_derivative(self, rng, rank):
        """B0 is the linearization of the engineering Voigt strain: δε = B0 δu."""
        n_nodes = 4
        G = rng.standard_normal((rank, n_nodes))
        u = 0.2 * rng.standard_normal(rank * n_nodes)
        F = eval_deformation_gradient(u, G)
        B = BUILDERS[rank](G, F)
        assert np.allclose(B, numerical_strain_derivative(u, G), atol=1e-7)

    def test_matches_strain_derivative_for_element(self, tet4, rng):
        _, G = tet4
        u = 0.3 * rng.standard_normal(12)
        B = get_3d_shape_grads_tl(G, eval_deformation_gradient(u, G))
        assert np.allclose(B, numerical_strain_derivative(u, G), atol=1e-7)


class TestShapeGradsContracts:
    def test_gradient_rank_mismatch(self):
        with pytest.raises(KinematicsContractError):
            get_2d_shape_grads_tl(np.zeros((3, 4)), np.eye(2))

    def test_F_rank_mismatch(self):
        with pytest.raises(KinematicsContractError):
            get_3d_shape_grads_tl(np.zeros((3, 4)), np.eye(2))

    def test_out_columns_mismatch(self):
        out = np.zeros((6, 9))
        with pytest.raises(KinematicsContractError):
            get_3d_shape_grads_tl(np.zeros((3, 4)), np.eye(3), out=out)

    def test_out_rows_mismatch(self):
        with pytest.raises(KinematicsContractError):
            get_2d_shape_grads_tl(np.zeros((2, 4)), np.eye(2), out=np.zeros((3, 8)))

    def test_1d_requires_scalar_F(self):
        with pytest.raises(KinematicsContractError):
            get_1d_shape_grads_tl(np.zeros((1, 2)), np.eye(2))


class TestDispatcher:
    @pytest.mark.parametrize("rank", [1, 2, 3])
    def test_returns_builder_for_rank(self, rng, rank):
        builder = get_shape_grads_tl_func(rank)
        assert builder is BUILDERS[rank]

        G = rng.standard_normal((rank, 3))
        F = np.eye(rank) + 0.1 * rng.standard_normal((rank, rank))
        assert np.array_equal(builder(G, F), BUILDERS[rank](G, F))

    @pytest.mark.parametrize("rank", [0, 4, -3, None, "2", True])
    def test_invalid_rank(self, rank):
        with pytest.raises(KinematicsContractError):
            get_shape_grads_tl_func(rank)

    def test_spatial_rank_members(self):
        assert [int(r) for r in SpatialRank] == [1, 2, 3]
        assert SpatialRank.TWO_D.strain_count == 4
        assert SpatialRank.THREE_D.shape_grads_tl is get_3d_shape_grads_tl

    def test_accepts_enum_member(self):
        assert get_shape_grads_tl_func(SpatialRank.ONE_D) is get_1d_shape_grads_tl
