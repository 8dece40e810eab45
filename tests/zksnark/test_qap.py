"""
QAP tests: qap.py
"""
import pytest

from zkp.zksnark.field import FR
from zkp.zksnark.polynomial import Polynomial
from zkp.zksnark.r1cs import ConstraintSystem
from zkp.zksnark.qap import QAP


class TestFromR1CS:
    def test_dimensions(self, sum_product_qap):
        qap = sum_product_qap
        assert qap.num_constraints == 3
        assert qap.num_variables == 8
        assert len(qap.u) == len(qap.v) == len(qap.w) == 8
        assert qap.points == [FR(1), FR(2), FR(3)]

    def test_empty_system(self):
        with pytest.raises(ValueError):
            QAP.from_r1cs(ConstraintSystem())

    def test_column_polynomials_match_rows(self, sum_product_circuit, sum_product_qap):
        """u_i(r_k) = A_k[i], v_i(r_k) = B_k[i], w_i(r_k) = C_k[i]"""
        cs, _ = sum_product_circuit
        A, B, C = cs.matrices()
        qap = sum_product_qap
        for k, r_k in enumerate(qap.points):
            for i in range(qap.num_variables):
                assert qap.u[i].evaluate(r_k) == FR(A[k][i])
                assert qap.v[i].evaluate(r_k) == FR(B[k][i])
                assert qap.w[i].evaluate(r_k) == FR(C[k][i])

    def test_polynomial_degree_bound(self, sum_product_qap):
        for poly in sum_product_qap.u + sum_product_qap.v + sum_product_qap.w:
            assert poly.degree <= sum_product_qap.num_constraints - 1

    def test_target_polynomial(self, sum_product_qap):
        t = sum_product_qap.t
        assert t.degree == 3
        assert t == Polynomial.from_roots([1, 2, 3])
        for r_k in sum_product_qap.points:
            assert t.evaluate(r_k) == FR(0)

    def test_negative_coefficients(self):
        cs = ConstraintSystem()
        cs.add_constraint([0, 1, 1, 0], [0, 1, -1, 0], [0, 0, 0, 1])
        qap = QAP.from_r1cs(cs)
        assert qap.v[2] == Polynomial([-1])
        assert qap.is_satisfied_by([1, 5, 3, 16])


class TestLagrangeBasis:
    def test_kronecker(self, sum_product_qap):
        qap = sum_product_qap
        for k in range(1, qap.num_constraints + 1):
            L_k = qap.lagrange_basis(k)
            for j in range(1, qap.num_constraints + 1):
                assert L_k.evaluate(j) == (FR(1) if j == k else FR(0))

    def test_single_constraint_basis_is_one(self, multiplication_qap):
        assert multiplication_qap.lagrange_basis(1) == Polynomial.one()

    def test_out_of_range(self, sum_product_qap):
        with pytest.raises(ValueError):
            sum_product_qap.lagrange_basis(0)
        with pytest.raises(ValueError):
            sum_product_qap.lagrange_basis(4)


class TestEvaluateAt:
    @pytest.mark.parametrize("x", [FR(123456789), FR(0), FR(-3), FR(2)])
    def test_matches_coefficient_form(self, sum_product_qap, x):
        qap = sum_product_qap
        ev = qap.evaluate_at(x)
        assert ev.u == [p.evaluate(x) for p in qap.u]
        assert ev.v == [p.evaluate(x) for p in qap.v]
        assert ev.w == [p.evaluate(x) for p in qap.w]
        assert ev.t == qap.t.evaluate(x)

    def test_int_point(self, multiplication_qap):
        ev = multiplication_qap.evaluate_at(4)
        assert ev.u == [FR(0), FR(1), FR(0), FR(0)]
        assert ev.t == FR(3)


class TestWitness:
    def test_per_point_identity(self, sum_product_circuit, sum_product_qap):
        """만족하는 증인이면 모든 r_k에서 A(r_k)·B(r_k) = C(r_k)"""
        _, witness = sum_product_circuit
        a_poly, b_poly, c_poly = sum_product_qap.combine(witness)
        for r_k in sum_product_qap.points:
            assert a_poly.evaluate(r_k) * b_poly.evaluate(r_k) == c_poly.evaluate(r_k)

    def test_divisible_by_target(self, sum_product_circuit, sum_product_qap):
        _, witness = sum_product_circuit
        h_poly, remainder = sum_product_qap.divide(witness)
        assert remainder.is_zero()
        assert h_poly.degree <= sum_product_qap.num_constraints - 2
        assert sum_product_qap.is_satisfied_by(witness)

    def test_quotient_identity(self, triple_product_circuit, triple_product_qap):
        _, witness = triple_product_circuit
        a_poly, b_poly, c_poly = triple_product_qap.combine(witness)
        h_poly, _ = triple_product_qap.divide(witness)
        assert a_poly * b_poly - c_poly == h_poly * triple_product_qap.t

    def test_corrupted_witness(self, sum_product_qap):
        assert not sum_product_qap.is_satisfied_by([1, 2, 3, 5, 7, 5, 12, 61])

    def test_wrong_length(self, sum_product_qap):
        with pytest.raises(ValueError):
            sum_product_qap.combine([1, 2, 3])
        with pytest.raises(ValueError):
            sum_product_qap.is_satisfied_by([1] * 9)
