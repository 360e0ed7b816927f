"""
Tests for Matrix4.
"""

import pytest
import torch

from rotorkit import Matrix4, Vector3


def _sequential(start):
    return Matrix4([float(v) for v in range(start, start + 16)])


class TestMatrixCreation:
    """Test matrix construction."""

    def test_zero(self):
        m = Matrix4.zero()
        assert torch.equal(m.values, torch.zeros(16))

    def test_identity(self):
        m = Matrix4.identity()
        for r in range(4):
            for c in range(4):
                assert m[r, c] == (1.0 if r == c else 0.0)

    def test_row_major_layout(self):
        """values[r * 4 + c] is row r, column c."""
        m = _sequential(1)
        assert m[0, 1] == 2.0
        assert m[1, 0] == 5.0
        assert m[3, 2] == 15.0
        assert m.values[1 * 4 + 2].item() == m[1, 2]

    def test_nested_rows_match_flat_values(self):
        flat = _sequential(1)
        nested = Matrix4([[1.0, 2.0, 3.0, 4.0],
                          [5.0, 6.0, 7.0, 8.0],
                          [9.0, 10.0, 11.0, 12.0],
                          [13.0, 14.0, 15.0, 16.0]])
        assert torch.equal(flat.values, nested.values)

    def test_stored_as_float32(self):
        m = Matrix4(torch.arange(16, dtype=torch.float64))
        assert m.values.dtype == torch.float32
        assert m.values.shape == (16,)

    def test_requires_16_values(self):
        with pytest.raises(ValueError, match="Expected 16"):
            Matrix4([1.0] * 15)
        with pytest.raises(ValueError, match="Expected 16"):
            Matrix4(torch.eye(3))

    def test_to_tensor_is_a_copy(self):
        m = Matrix4.identity()
        t = m.to_tensor()
        assert t.shape == (4, 4)
        t[0, 0] = 5.0
        assert m[0, 0] == 1.0


class TestMatrixMultiplication:
    """Test the matrix product."""

    def test_known_product(self):
        """[1..16] * [17..32] in row-major order."""
        expected = Matrix4([
            250.0, 260.0, 270.0, 280.0,
            618.0, 644.0, 670.0, 696.0,
            986.0, 1028.0, 1070.0, 1112.0,
            1354.0, 1412.0, 1470.0, 1528.0,
        ])
        product = _sequential(1) * _sequential(17)
        assert product.allclose(expected, atol=1e-4)

    def test_matmul_operator(self):
        a, b = _sequential(1), _sequential(17)
        assert (a @ b).allclose(a * b)

    def test_identity_is_neutral(self):
        a = _sequential(1)
        assert (Matrix4.identity() * a).allclose(a)
        assert (a * Matrix4.identity()).allclose(a)

    def test_zero_annihilates(self):
        assert (_sequential(1) * Matrix4.zero()).allclose(Matrix4.zero())

    def test_associative(self, generator):
        a, b, c = (Matrix4(torch.randn(16, generator=generator)) for _ in range(3))
        assert ((a * b) * c).allclose(a * (b * c), atol=1e-4)

    def test_not_commutative(self):
        a, b = _sequential(1), _sequential(17)
        assert not (a * b).allclose(b * a)

    def test_inputs_unchanged(self):
        a, b = _sequential(1), _sequential(17)
        a * b
        assert a.allclose(_sequential(1))
        assert b.allclose(_sequential(17))

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Matrix4.identity() * 2.0


class TestColumnMajor:
    """Test the column-major view."""

    def test_transpose(self):
        cols = _sequential(1).get_column_major()
        assert cols == [
            [1.0, 5.0, 9.0, 13.0],
            [2.0, 6.0, 10.0, 14.0],
            [3.0, 7.0, 11.0, 15.0],
            [4.0, 8.0, 12.0, 16.0],
        ]

    def test_does_not_mutate(self):
        m = _sequential(1)
        m.get_column_major()
        assert m[0, 1] == 2.0


class TestTransformPoint:
    """Test homogeneous point transformation."""

    def test_identity(self):
        v = Vector3(1.0, -2.0, 3.0)
        assert Matrix4.identity().transform_point(v).allclose(v)

    def test_translation_column(self):
        m = Matrix4([
            1.0, 0.0, 0.0, 10.0,
            0.0, 1.0, 0.0, 20.0,
            0.0, 0.0, 1.0, 30.0,
            0.0, 0.0, 0.0, 1.0,
        ])
        result = m.transform_point(Vector3(1.0, 2.0, 3.0))
        assert result.allclose(Vector3(11.0, 22.0, 33.0))
