"""
QAP (Quadratic Arithmetic Program)
===================================

R1CS를 다항식 형태로 바꾼다.

**변환**:
  제약이 n개, 증인 변수가 m개일 때, 제약 k (1-based)마다 평가점 r_k = k를
  둔다. 열 i마다 세 개의 다항식을 Lagrange 기저로 만든다:

    u_i(x) = Σ_k A_k[i] · L_k(x)
    v_i(x) = Σ_k B_k[i] · L_k(x)
    w_i(x) = Σ_k C_k[i] · L_k(x)

    L_k(x) = ∏_{j≠k} (x - j) / (k - j)     (L_k(k) = 1, L_k(j) = 0)

  목표 다항식은 모든 평가점에서 0이 된다:

    t(x) = ∏_{k=1}^{n} (x - k)

**핵심 성질**:
  증인 w에 대해 A(x) = Σ wᵢ·uᵢ(x), B(x) = Σ wᵢ·vᵢ(x), C(x) = Σ wᵢ·wᵢ(x)라 하면
  x = r_k에서 A(r_k)·B(r_k) - C(r_k)는 k번째 제약의 (A·w)(B·w) - C·w 이다.
  따라서 모든 제약이 만족될 때, 그리고 그때에만

    A(x)·B(x) - C(x) = H(x) · t(x)

  를 만족하는 다항식 H(x)가 존재한다.

  (w_i(x) 다항식과 증인 값 wᵢ의 이름이 겹치는 것은 이 분야의 관례이다.)

사용 예시:
    >>> qap = QAP.from_r1cs(cs)
    >>> qap.u[1].evaluate(1)   # 첫 제약의 A[1]
    >>> qap.t.evaluate(1)      # FR(0)
    >>> ev = qap.evaluate_at(FR(6))
"""

from collections import namedtuple

from zkp.zksnark.field import FR, to_fr
from zkp.zksnark.polynomial import (
    Polynomial,
    lagrange_basis,
    lagrange_basis_eval,
    poly_div,
)


QAPEvaluation = namedtuple("QAPEvaluation", ["u", "v", "w", "t"])


def _column(matrix, i):
    return [row[i] for row in matrix]


def _combine(polys, witness):
    # Σ wᵢ · pᵢ(x)
    result = Polynomial.zero()
    for poly, value in zip(polys, witness):
        value = to_fr(value)
        if value == FR(0):
            continue
        result = result + poly.scale(value)
    return result


class QAP:
    """R1CS에서 유도된 읽기 전용 QAP.

    속성:
        u, v, w: 열마다 하나씩인 Polynomial 리스트 (계수 형태)
        t: 목표 다항식 ∏ (x - k)
        points: 평가점 [FR(1), ..., FR(n)]
        A, B, C: FR로 변환한 R1CS 행렬 사본 (evaluate_at에서 사용)
    """

    def __init__(self, u, v, w, t, points, A, B, C):
        self.u = u
        self.v = v
        self.w = w
        self.t = t
        self.points = points
        self.A = A
        self.B = B
        self.C = C

    @property
    def num_variables(self):
        return len(self.u)

    @property
    def num_constraints(self):
        return len(self.points)

    @classmethod
    def from_r1cs(cls, constraint_system):
        """ConstraintSystem을 QAP로 변환한다.

        Raises:
            ValueError: 제약이 하나도 없을 때
        """
        n = constraint_system.num_constraints
        if n == 0:
            raise ValueError("제약이 없는 시스템은 QAP로 변환할 수 없습니다")
        m = constraint_system.num_variables

        points = [FR(k) for k in range(1, n + 1)]
        A, B, C = (
            [[to_fr(x) for x in row] for row in matrix]
            for matrix in constraint_system.matrices()
        )

        # 제약이 하나면 L_1(x) = 1
        bases = [lagrange_basis(points, k) for k in range(n)]

        def interpolate(matrix, i):
            return _combine(bases, _column(matrix, i))

        u = [interpolate(A, i) for i in range(m)]
        v = [interpolate(B, i) for i in range(m)]
        w = [interpolate(C, i) for i in range(m)]
        t = Polynomial.from_roots(points)

        return cls(u, v, w, t, points, A, B, C)

    def lagrange_basis(self, k):
        """k번째 제약점(1-based)의 Lagrange 기저 L_k(x)."""
        if not 1 <= k <= self.num_constraints:
            raise ValueError(f"제약 인덱스 {k}가 범위 [1, {self.num_constraints}] 밖입니다")
        return lagrange_basis(self.points, k - 1)

    def evaluate_at(self, x):
        """모든 u_i, v_i, w_i, t를 한 점 x에서 평가한다.

        계수 배열을 쓰지 않고, x에서의 Lagrange 기저 값과 R1CS 행렬로
        직접 계산한다 (CRS 생성에서 사용).

        Returns:
            QAPEvaluation(u, v, w, t): u, v, w는 FR 리스트, t는 FR
        """
        x = to_fr(x)
        basis = lagrange_basis_eval(self.points, x)
        m = self.num_variables

        def column_eval(matrix, i):
            total = FR(0)
            for l_k, row in zip(basis, matrix):
                total = total + row[i] * l_k
            return total

        u_eval = [column_eval(self.A, i) for i in range(m)]
        v_eval = [column_eval(self.B, i) for i in range(m)]
        w_eval = [column_eval(self.C, i) for i in range(m)]

        t_eval = FR(1)
        for r_k in self.points:
            t_eval = t_eval * (x - r_k)

        return QAPEvaluation(u_eval, v_eval, w_eval, t_eval)

    def check_witness_length(self, witness):
        if len(witness) != self.num_variables:
            raise ValueError(
                f"증인 길이 {len(witness)}가 QAP 열 수 {self.num_variables}와 다릅니다"
            )

    def combine(self, witness):
        """증인으로 가중합한 (A(x), B(x), C(x)) 다항식."""
        self.check_witness_length(witness)
        return (
            _combine(self.u, witness),
            _combine(self.v, witness),
            _combine(self.w, witness),
        )

    def divide(self, witness):
        """A(x)·B(x) - C(x) 를 t(x)로 나눈 (몫, 나머지)."""
        a_poly, b_poly, c_poly = self.combine(witness)
        return poly_div(a_poly * b_poly - c_poly, self.t)

    def is_satisfied_by(self, witness):
        """t(x)가 A(x)·B(x) - C(x)를 나누는지 확인한다."""
        _, remainder = self.divide(witness)
        return remainder.is_zero()
