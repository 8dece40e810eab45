"""
R1CS (Rank-1 Constraint System)
================================

산술 회로를 (A, B, C) 계수 벡터의 행들로 표현한다.

**제약 한 행**:
  증인(witness) 벡터 w에 대해

    (A·w) × (B·w) = (C·w)

  여기서 ·는 내적(inner product)이다. w[0]은 관례적으로 상수 1이다.

**예시**: a × b = c, w = [1, a, b, c]
  A = [0, 1, 0, 0]   → A·w = a
  B = [0, 0, 1, 0]   → B·w = b
  C = [0, 0, 0, 1]   → C·w = c

모든 행의 길이(열 수, 즉 증인 변수 수)는 같아야 하며,
첫 제약이 추가되는 순간 시스템의 열 수가 고정된다.

사용 예시:
    >>> cs = ConstraintSystem()
    >>> cs.add_constraint([0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1])
    >>> cs.evaluate([1, 3, 4, 12])  # True
"""

from zkp.zksnark.field import FR


def inner_product(vec1, vec2):
    """두 벡터의 내적 Σ vec1[i]·vec2[i].

    정수끼리는 정수 산술로, FR 원소가 섞이면 필드 산술로 계산된다.

    Raises:
        ValueError: 길이가 다를 때
    """
    if len(vec1) != len(vec2):
        raise ValueError(f"벡터 길이가 다릅니다: {len(vec1)} != {len(vec2)}")
    total = 0
    for a, b in zip(vec1, vec2):
        total = a * b + total
    return total


def _integral(x):
    if isinstance(x, FR):
        return x
    if int(x) != x:
        raise ValueError(f"제약 계수는 정수여야 합니다: {x!r}")
    return int(x)


def _normalize(vec):
    vec = [_integral(x) for x in vec]
    if any(isinstance(x, FR) for x in vec):
        return [x if isinstance(x, FR) else FR(x) for x in vec]
    return vec


class Constraint:
    """R1CS 제약 한 행 (A, B, C)."""

    def __init__(self, A, B, C):
        if not (len(A) == len(B) == len(C)):
            raise ValueError(
                f"A, B, C 벡터의 길이가 같아야 합니다: {len(A)}, {len(B)}, {len(C)}"
            )
        if len(A) == 0:
            raise ValueError("제약 벡터가 비어 있습니다")
        self.A = _normalize(A)
        self.B = _normalize(B)
        self.C = _normalize(C)

    def __len__(self):
        return len(self.A)

    def evaluate(self, witness):
        """(A·w) × (B·w) == (C·w) 인지 확인한다."""
        a_eval = inner_product(self.A, witness)
        b_eval = inner_product(self.B, witness)
        c_eval = inner_product(self.C, witness)
        return a_eval * b_eval == c_eval

    def __repr__(self):
        return f"Constraint(A={self.A}, B={self.B}, C={self.C})"


class ConstraintSystem:
    """R1CS 제약들의 순서 있는 모음.

    같은 증인이 모든 행을 만족할 때 시스템이 만족된다.

    속성:
        constraints: Constraint 리스트 (추가 순서 = QAP 평가점 순서)
        num_variables: 열 수 (첫 제약이 추가되기 전에는 None)
    """

    def __init__(self):
        self.constraints = []
        self.num_variables = None

    @property
    def num_constraints(self):
        return len(self.constraints)

    def add_constraint(self, A, B, C):
        """제약 (A, B, C)를 추가한다.

        Returns:
            int: 추가된 제약의 인덱스 (0-based)

        Raises:
            ValueError: 벡터 길이가 서로 다르거나 시스템의 열 수와 다를 때
        """
        constraint = Constraint(A, B, C)
        if self.num_variables is not None and len(constraint) != self.num_variables:
            raise ValueError(
                f"제약 벡터 길이 {len(constraint)}가 시스템의 열 수 "
                f"{self.num_variables}와 다릅니다"
            )
        self.constraints.append(constraint)
        self.num_variables = len(constraint)
        return len(self.constraints) - 1

    def _check_witness(self, witness):
        if self.num_variables is not None and len(witness) != self.num_variables:
            raise ValueError(
                f"증인 길이 {len(witness)}가 시스템의 열 수 {self.num_variables}와 다릅니다"
            )

    def unsatisfied(self, witness):
        """만족되지 않는 제약들의 인덱스 리스트 (0-based)."""
        self._check_witness(witness)
        return [
            i for i, constraint in enumerate(self.constraints)
            if not constraint.evaluate(witness)
        ]

    def evaluate(self, witness):
        """모든 제약이 witness로 만족되는지 확인한다.

        증명 프로토콜의 일부가 아니라 테스트/디버깅용이다.

        Raises:
            ValueError: 증인 길이가 열 수와 다를 때
        """
        return not self.unsatisfied(witness)

    def matrices(self):
        """(A, B, C) 행렬 (각각 제약 수 × 열 수) 을 반환한다."""
        A = [list(c.A) for c in self.constraints]
        B = [list(c.B) for c in self.constraints]
        C = [list(c.C) for c in self.constraints]
        return A, B, C
