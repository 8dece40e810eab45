"""
Trusted setup tests: crs.py
"""
import pytest

from zkp.zksnark.field import FR, G1, G2, CURVE_ORDER, ec_mul, is_on_g1, is_on_g2
from zkp.zksnark.crs import CRS, quotient_domain
from zkp.zksnark.serializers import serialize_crs, to_json


TOXIC_TAU = 123456789
MULTIPLICATION_TAU = 4


class TestQuotientDomain:
    def test_points(self):
        assert quotient_domain(3) == [FR(0), FR(-1), FR(-2)]

    def test_disjoint_from_constraint_points(self):
        domain = quotient_domain(8)
        assert all(x not in [FR(k) for k in range(1, 9)] for x in domain)


class TestCRSShape:
    def test_lengths(self, sum_product_qap, sum_product_crs):
        m = sum_product_qap.num_variables
        assert len(sum_product_crs.g1_u) == m
        assert len(sum_product_crs.g2_v) == m
        assert len(sum_product_crs.g1_w) == m
        assert len(sum_product_crs.g1_h) == CRS.power_count(sum_product_qap)
        assert sum_product_crs.num_variables == m

    def test_power_count(self, multiplication_qap, sum_product_qap):
        assert CRS.power_count(multiplication_qap) == 4
        assert CRS.power_count(sum_product_qap) == 8

    def test_points_on_curve(self, sum_product_crs):
        crs = sum_product_crs
        assert all(is_on_g1(p) for p in crs.g1_u + crs.g1_w + crs.g1_h)
        assert all(is_on_g2(p) for p in crs.g2_v)
        assert is_on_g2(crs.T)

    def test_no_tau_attribute(self, sum_product_crs):
        assert not hasattr(sum_product_crs, "tau")
        with pytest.raises(AttributeError):
            sum_product_crs.tau = 1


class TestCRSValues:
    def test_powers_of_tau(self, sum_product_crs):
        g1_h = sum_product_crs.g1_h
        assert g1_h[0] == G1
        assert g1_h[1] == ec_mul(G1, TOXIC_TAU)
        assert g1_h[2] == ec_mul(G1, FR(TOXIC_TAU) * FR(TOXIC_TAU))

    def test_target_commitment(self, sum_product_qap, sum_product_crs):
        t_tau = sum_product_qap.t.evaluate(TOXIC_TAU)
        assert t_tau != FR(0)
        assert sum_product_crs.T == ec_mul(G2, t_tau)
        assert sum_product_crs.T is not None

    def test_column_commitments(self, sum_product_qap, sum_product_crs):
        qap, crs = sum_product_qap, sum_product_crs
        for i in range(qap.num_variables):
            assert crs.g1_u[i] == ec_mul(G1, qap.u[i].evaluate(TOXIC_TAU))
            assert crs.g2_v[i] == ec_mul(G2, qap.v[i].evaluate(TOXIC_TAU))
            assert crs.g1_w[i] == ec_mul(G1, qap.w[i].evaluate(TOXIC_TAU))

    def test_zero_evaluation_is_identity(self, multiplication_crs):
        """u_0 ≡ 0 이므로 g1_u[0]은 항등원"""
        assert multiplication_crs.g1_u[0] is None
        assert multiplication_crs.g1_u[1] == G1
        assert multiplication_crs.g2_v[2] == G2
        assert multiplication_crs.g1_w[3] == G1

    def test_multiplication_target(self, multiplication_crs):
        # t(x) = x - 1, τ = 4
        assert multiplication_crs.T == ec_mul(G2, MULTIPLICATION_TAU - 1)


class TestDeterminism:
    def test_same_tau_same_crs(self, sum_product_qap, sum_product_crs):
        again = CRS.generate(sum_product_qap, tau=TOXIC_TAU)
        assert again == sum_product_crs
        assert to_json(serialize_crs(again)) == to_json(serialize_crs(sum_product_crs))

    def test_fr_tau_equals_int_tau(self, multiplication_qap, multiplication_crs):
        assert CRS.generate(multiplication_qap, tau=FR(MULTIPLICATION_TAU)) == multiplication_crs

    def test_random_tau_differs(self, multiplication_qap):
        first = CRS.generate(multiplication_qap)
        second = CRS.generate(multiplication_qap)
        assert first.T != second.T
        assert first.g1_h[1] != second.g1_h[1]


class TestInvalidTau:
    def test_constraint_point(self, sum_product_qap):
        for k in (1, 2, 3):
            with pytest.raises(ValueError):
                CRS.generate(sum_product_qap, tau=k)

    def test_sample_point_zero(self, multiplication_qap):
        with pytest.raises(ValueError):
            CRS.generate(multiplication_qap, tau=0)

    def test_sample_point_negative(self, multiplication_qap):
        # -1 ≡ p - 1 은 H(x) 표본점
        with pytest.raises(ValueError):
            CRS.generate(multiplication_qap, tau=-1)
        with pytest.raises(ValueError):
            CRS.generate(multiplication_qap, tau=CURVE_ORDER - 3)

    def test_largest_admissible(self, multiplication_qap):
        d = CRS.power_count(multiplication_qap)
        crs = CRS.generate(multiplication_qap, tau=CURVE_ORDER - d)
        assert crs.T is not None
