"""
zkSNARK Prover
===============

증인(witness)과 CRS로 증명 {A, B, C, H}를 만든다.

**증명 생성 단계**:

  1. 커밋먼트 (증인 가중합, 가중치 0인 항은 생략)
       A = Σ wᵢ · g1_u[i]   = A(τ)·G1
       B = Σ wᵢ · g2_v[i]   = B(τ)·G2
       C = Σ wᵢ · g1_w[i]   = C(τ)·G1

  2. 몫 다항식 표본 추출
       표본점 x ∈ {0, -1, ..., -(d-1)} 에서
       h(x) = (A(x)·B(x) - C(x)) / t(x)

  3. d개의 (x, h(x))를 Lagrange 보간하여 H(x)의 계수를 복원

  4. H = Σ H_j · g1_h[j]  = H(τ)·G1

  검증자는 e(A, B) = e(C, G2) · e(H, T), 즉
  A(τ)·B(τ) - C(τ) = H(τ)·t(τ) 를 페어링으로 확인한다.

**주의**:
  기본 동작에서 Prover는 증인이 제약을 만족하는지 검사하지 않는다.
  잘못된 증인으로 만든 증명은 검증 단계에서 거부된다.
  check_witness=True를 주면 그룹 연산 전에 먼저 검사하고 ValueError를 낸다.

사용 예시:
    >>> proof = generate_proof(qap, crs, [1, 3, 4, 12])
    >>> verify(proof, crs.T)  # True
"""

import logging

from zkp.zksnark.field import FR, ec_sum, fr_inv, to_fr
from zkp.zksnark.polynomial import lagrange_interpolate
from zkp.zksnark.crs import quotient_domain


logger = logging.getLogger(__name__)


class Proof:
    """zkSNARK 증명 데이터 컨테이너.

    속성:
        A: G1 점, A(τ)·G1
        B: G2 점, B(τ)·G2
        C: G1 점, C(τ)·G1
        H: G1 점, H(τ)·G1
    """

    __slots__ = ("A", "B", "C", "H")

    def __init__(self, A, B, C, H):
        self.A = A
        self.B = B
        self.C = C
        self.H = H

    def __eq__(self, other):
        if not isinstance(other, Proof):
            return NotImplemented
        return (self.A, self.B, self.C, self.H) == (other.A, other.B, other.C, other.H)

    def __repr__(self):
        return f"Proof(A={self.A}, B={self.B}, C={self.C}, H={self.H})"


def _weighted_eval(values, witness):
    total = FR(0)
    for value, weight in zip(values, witness):
        total = total + value * weight
    return total


def quotient_samples(qap, witness, size):
    """표본점마다 h(x) = (A(x)·B(x) - C(x)) / t(x) 를 계산한다.

    Returns:
        list: [(x, h(x)), ...] (길이 size)
    """
    samples = []
    for x in quotient_domain(size):
        t_eval = qap.t.evaluate(x)
        a_eval = _weighted_eval([p.evaluate(x) for p in qap.u], witness)
        b_eval = _weighted_eval([p.evaluate(x) for p in qap.v], witness)
        c_eval = _weighted_eval([p.evaluate(x) for p in qap.w], witness)
        numerator = a_eval * b_eval - c_eval
        if t_eval == FR(0):
            # 만족하는 증인이면 분자도 0
            samples.append((x, FR(0)))
        else:
            samples.append((x, numerator * fr_inv(t_eval)))
    return samples


def generate_proof(qap, crs, witness, check_witness=False):
    """증명을 생성한다.

    Args:
        qap: QAP
        crs: 같은 QAP로 만든 CRS
        witness: 증인 벡터 (정수 또는 FR, 길이 = QAP 열 수)
        check_witness: True이면 증명 전에 제약 만족 여부를 검사

    Returns:
        Proof

    Raises:
        ValueError: 증인/CRS 크기가 QAP와 맞지 않을 때,
                    또는 check_witness=True인데 제약이 만족되지 않을 때
    """
    qap.check_witness_length(witness)
    if crs.num_variables != qap.num_variables:
        raise ValueError(
            f"CRS 열 수 {crs.num_variables}가 QAP 열 수 {qap.num_variables}와 다릅니다"
        )
    witness = [to_fr(x) for x in witness]

    if check_witness:
        _, remainder = qap.divide(witness)
        if not remainder.is_zero():
            violated = [
                k for k, r_k in enumerate(qap.points, start=1)
                if remainder.evaluate(r_k) != FR(0)
            ]
            raise ValueError(f"증인이 제약 {violated}을(를) 만족하지 않습니다")

    # 1) A, B, C 커밋먼트
    A = ec_sum(crs.g1_u, witness)
    B = ec_sum(crs.g2_v, witness)
    C = ec_sum(crs.g1_w, witness)

    # 2), 3) H(x) 표본 추출 및 보간
    d = len(crs.g1_h)
    if d < qap.num_constraints - 1:
        raise ValueError(
            f"CRS 거듭제곱 {d}개로는 차수 {qap.num_constraints - 2}인 H(x)를 커밋할 수 없습니다"
        )
    h_poly = lagrange_interpolate(quotient_samples(qap, witness, d))

    # 4) H 커밋먼트
    H = ec_sum(crs.g1_h[:len(h_poly)], h_poly.coeffs)

    logger.debug("증명 생성 완료: 표본점 %d개, deg H = %d", d, h_poly.degree)
    return Proof(A, B, C, H)


class Prover:
    """증인을 보관하고 증명을 만드는 얇은 래퍼."""

    def __init__(self, witness):
        self.witness = list(witness)

    def generate_proof(self, qap, crs, check_witness=False):
        return generate_proof(qap, crs, self.witness, check_witness=check_witness)
