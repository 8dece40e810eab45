"""
zkSNARK 기반 모듈: 다항식(Polynomial) 엔진
============================================

QAP 변환과 Prover가 사용하는 FR 위의 다항식 연산을 제공한다.

**Polynomial 클래스**:
  계수(coefficient) 표현 기반 다항식. p(x) = c₀ + c₁·x + c₂·x² + ...
  QAP의 u_i(x), v_i(x), w_i(x), 목표 다항식 t(x), 몫 다항식 H(x)가
  모두 이 클래스의 인스턴스이다. 클로저 대신 계수 배열을 한 번 계산해
  보관하므로 차수 상한이 명시적이다.

**Lagrange 보간**:
  서로 다른 점 x₀, ..., x_{n-1}과 값 y₀, ..., y_{n-1}이 주어지면
  p(xᵢ) = yᵢ를 만족하는 (n-1)차 이하의 유일한 다항식을 구한다.

    L_i(x) = ∏_{j≠i} (x - x_j) / (x_i - x_j)
    p(x)   = Σ yᵢ · L_i(x)

  - QAP: 제약 k마다 점 r_k = k를 두고 R1CS 행렬의 열을 보간
  - Prover: 표본점에서 계산한 h(x) 값으로 H(x)의 계수를 복원

**다항식 나눗셈 (poly_div)**:
  A(x)·B(x) - C(x)가 t(x)로 나누어 떨어지는지 확인할 때 사용한다.

사용 예시:
    >>> from zkp.zksnark.polynomial import Polynomial, lagrange_interpolate
    >>> p = lagrange_interpolate([(1, 2), (2, 4)])  # 2x
    >>> p.evaluate(FR(5))  # FR(10)
"""

from zkp.zksnark.field import FR, fr_inv, to_fr


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 리스트로 표현: coeffs = [c₀, c₁, c₂, ...] → c₀ + c₁x + c₂x² + ...

    예시:
        >>> p = Polynomial([1, 2])  # 1 + 2x
        >>> q = Polynomial([3, 4])  # 3 + 4x
        >>> p + q                   # 4 + 6x
        >>> p * q                   # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: 정수 또는 FR 원소의 리스트 [c₀, c₁, ...].
                    None이거나 비어 있으면 영 다항식(0)을 생성한다.
        """
        if not coeffs:
            self.coeffs = [FR(0)]
        else:
            self.coeffs = [to_fr(c) for c in coeffs]
        self._trim()

    def _trim(self):
        """최고차 계수가 0인 항을 제거하여 정규화한다."""
        while len(self.coeffs) > 1 and self.coeffs[-1] == FR(0):
            self.coeffs.pop()

    @property
    def degree(self):
        """다항식의 차수. 영 다항식의 차수는 0으로 정의한다."""
        return len(self.coeffs) - 1

    def is_zero(self):
        """영 다항식인지 확인."""
        return len(self.coeffs) == 1 and self.coeffs[0] == FR(0)

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        Args:
            point: 평가할 점 (정수 또는 FR)

        Returns:
            FR: p(point) 값

        예시:
            >>> Polynomial([1, 2, 3]).evaluate(2)  # 1 + 4 + 12 = FR(17)
        """
        point = to_fr(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def __call__(self, point):
        return self.evaluate(point)

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        size = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(size):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a + b)
        return Polynomial(result)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return self + (-other)

    def __rsub__(self, other):
        return (-self) + other

    def __neg__(self):
        return Polynomial([FR(0) - c for c in self.coeffs])

    def __mul__(self, other):
        """다항식 곱셈 또는 스칼라곱.

        다항식 × 다항식: O(n·m) 합성곱 (convolution)
        다항식 × 스칼라: 각 계수에 스칼라를 곱함
        """
        if isinstance(other, (int, FR)):
            return self.scale(other)
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a == FR(0):
                continue
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self):
        return hash(tuple(int(c) for c in self.coeffs))

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"

    def __len__(self):
        """계수 개수 반환 (차수 + 1)."""
        return len(self.coeffs)

    def scale(self, scalar):
        """스칼라곱: scalar · p(x)."""
        scalar = to_fr(scalar)
        return Polynomial([c * scalar for c in self.coeffs])

    @classmethod
    def zero(cls):
        """영 다항식 p(x) = 0."""
        return cls([FR(0)])

    @classmethod
    def one(cls):
        """상수 다항식 p(x) = 1."""
        return cls([FR(1)])

    @classmethod
    def from_roots(cls, roots):
        """주어진 근을 갖는 모닉 다항식 ∏ (x - rᵢ).

        QAP의 목표 다항식 t(x) = (x - 1)(x - 2)···(x - n)이 이 형태이다.

        예시:
            >>> Polynomial.from_roots([1, 2])  # x² - 3x + 2
        """
        result = cls.one()
        for root in roots:
            result = result * cls([FR(0) - to_fr(root), FR(1)])
        return result


# ─────────────────────────────────────────────────────────────────────
# 다항식 나눗셈 (Polynomial Long Division)
# ─────────────────────────────────────────────────────────────────────

def poly_div(a, b):
    """다항식 나눗셈: a(x) = b(x) · q(x) + r(x).

    Args:
        a: 피제수 다항식
        b: 제수 다항식

    Returns:
        tuple: (몫 Polynomial, 나머지 Polynomial)

    Raises:
        ZeroDivisionError: 제수가 영 다항식인 경우

    예시:
        >>> q, r = poly_div(Polynomial([-1, 0, 1]), Polynomial([-1, 1]))
        >>> q  # x + 1
        >>> r  # 0
    """
    if b.is_zero():
        raise ZeroDivisionError("영 다항식으로 나눌 수 없습니다")

    remainder = list(a.coeffs)
    divisor = b.coeffs
    deg_b = len(divisor) - 1
    deg_a = len(remainder) - 1

    if deg_a < deg_b:
        return Polynomial.zero(), Polynomial(remainder)

    quotient = [FR(0)] * (deg_a - deg_b + 1)
    lead_inv = fr_inv(divisor[-1])

    for i in range(deg_a - deg_b, -1, -1):
        coeff = remainder[i + deg_b] * lead_inv
        quotient[i] = coeff
        if coeff == FR(0):
            continue
        for j in range(deg_b + 1):
            remainder[i + j] = remainder[i + j] - coeff * divisor[j]

    return Polynomial(quotient), Polynomial(remainder[:deg_b] or [FR(0)])


# ─────────────────────────────────────────────────────────────────────
# Lagrange 기저 / 보간
# ─────────────────────────────────────────────────────────────────────

def _check_distinct(domain):
    if len({int(d) for d in domain}) != len(domain):
        raise ValueError("보간 도메인의 점들이 서로 달라야 합니다")


def lagrange_basis(domain, i):
    """i번째 Lagrange 기저 다항식 L_i(x)를 계수 형태로 반환한다.

    L_i(x) = ∏_{j≠i} (x - d_j) / (d_i - d_j)

    성질: L_i(d_j) = δ_{ij} (크로네커 델타)

    Args:
        domain: 서로 다른 점들의 리스트 [d₀, d₁, ..., d_{n-1}]
        i: 기저 인덱스 (0-based)

    Returns:
        Polynomial: L_i(x). 도메인의 점이 하나뿐이면 상수 1.

    예시:
        >>> L0 = lagrange_basis([FR(1), FR(2), FR(3)], 0)
        >>> L0.evaluate(1), L0.evaluate(2)  # FR(1), FR(0)
    """
    domain = [to_fr(d) for d in domain]
    _check_distinct(domain)
    result = Polynomial.one()
    denominator = FR(1)

    for j, d_j in enumerate(domain):
        if j == i:
            continue
        result = result * Polynomial([FR(0) - d_j, FR(1)])
        denominator = denominator * (domain[i] - d_j)

    return result * fr_inv(denominator)


def lagrange_basis_eval(domain, point):
    """모든 Lagrange 기저를 한 점에서 평가한 값 [L_0(x), ..., L_{n-1}(x)].

    계수 배열을 만들지 않고 곱셈만으로 계산한다. x가 도메인 위의 점이면
    크로네커 델타를 그대로 돌려준다.
    """
    domain = [to_fr(d) for d in domain]
    point = to_fr(point)
    values = []
    for i, d_i in enumerate(domain):
        numerator = FR(1)
        denominator = FR(1)
        for j, d_j in enumerate(domain):
            if j == i:
                continue
            numerator = numerator * (point - d_j)
            denominator = denominator * (d_i - d_j)
        values.append(numerator * fr_inv(denominator))
    return values


def lagrange_interpolate(points):
    """(x, y) 쌍들을 지나는 유일한 최소 차수 다항식을 구한다.

    p(x) = Σᵢ yᵢ · ∏_{j≠i} (x - x_j) / (x_i - x_j)

    Args:
        points: [(x₀, y₀), (x₁, y₁), ...]. x들은 서로 달라야 한다.

    Returns:
        Polynomial: 보간 다항식 (점이 없으면 영 다항식)

    Raises:
        ValueError: x 좌표가 중복될 때

    예시:
        >>> p = lagrange_interpolate([(1, 3), (2, 5), (3, 7)])  # 2x + 1
        >>> p.degree  # 1
    """
    xs = [to_fr(x) for x, _ in points]
    ys = [to_fr(y) for _, y in points]
    _check_distinct(xs)

    result = Polynomial.zero()
    for i, y_i in enumerate(ys):
        if y_i == FR(0):
            continue
        numerator = Polynomial.one()
        denominator = FR(1)
        for j, x_j in enumerate(xs):
            if j == i:
                continue
            numerator = numerator * Polynomial([FR(0) - x_j, FR(1)])
            denominator = denominator * (xs[i] - x_j)
        result = result + numerator * (y_i * fr_inv(denominator))
    return result
