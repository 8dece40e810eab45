"""
zkSNARK 기반 모듈: 스칼라 필드(Scalar Field) 및 타원곡선 그룹 연산
====================================================================

R1CS → QAP → CRS → Prover → Verifier 파이프라인 전체가 사용하는
대수적 도구를 한곳에 모은다. 곡선과 필드 자체는 py_ecc의 bn128
구현을 그대로 쓰고, 이 모듈은 코어가 필요로 하는 연산만 이름을 붙인다.

**유한체 FR**:
  bn128 곡선의 스칼라 필드. QAP 다항식의 모든 계수, τ, 증인(witness)
  값이 이 필드의 원소이다.
  - FR(x)는 임의의 정수를 [0, p) 대표값으로 정규화한다 (음수 포함).
  - py_ecc의 나눗셈은 0의 역원을 조용히 0으로 돌려주므로,
    역원은 반드시 fr_inv()로 구한다.

**그룹 G1, G2, GT**:
  - G1, G2: 생성자 (generator)
  - Z1, Z2: 항등원 (py_ecc에서는 None)
  - GT: 페어링 결과가 속하는 FQ12의 부분군, 항등원은 GT_ONE

사용 예시:
    >>> from zkp.zksnark.field import FR, G1, ec_mul
    >>> a = FR(3) * FR(7)     # FR(21)
    >>> P = ec_mul(G1, a)      # 21·G1
    >>> ec_mul(G1, 0) is None  # True (항등원)
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ를 상속하여 +, -, *, ** 등의 필드 연산을 제공한다.

    예시:
        >>> FR(-1) == FR(CURVE_ORDER - 1)  # True
        >>> FR(6) * fr_inv(FR(3))          # FR(2)
    """
    field_modulus = bn128.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bn128.curve_order


def to_fr(value):
    """정수 또는 FR 값을 FR 원소로 변환한다."""
    if isinstance(value, FR):
        return value
    return FR(int(value))


def fr_inv(value):
    """FR 원소의 곱셈 역원.

    py_ecc의 FQ 나눗셈은 0으로 나누면 예외 없이 0을 돌려준다.
    코어에서 역원이 필요한 곳은 모두 이 함수를 거쳐 0을 명시적으로 거부한다.

    Raises:
        ZeroDivisionError: value가 0일 때
    """
    value = to_fr(value)
    if value == FR(0):
        raise ZeroDivisionError("FR(0)의 역원은 존재하지 않습니다")
    return FR(1) / value


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1, G2 그룹 생성자 (generator)
G1 = bn128.G1
G2 = bn128.G2

# 항등원 (point at infinity)
Z1 = None
Z2 = None

# GT의 항등원
GT_ONE = bn128.FQ12.one()


def is_identity(point):
    """점이 항등원(무한원점)인지 확인."""
    return point is None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    스칼라가 0 (mod r)이거나 점이 항등원이면 일반 곱셈 경로를 거치지 않고
    바로 항등원을 돌려준다.

    Args:
        point: G1 또는 G2 위의 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점)
    """
    scalar = int(scalar) % CURVE_ORDER
    if scalar == 0 or point is None:
        return None
    return bn128.multiply(point, scalar)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원: -point."""
    return bn128.neg(point)


def ec_sum(points, scalars):
    """인덱스가 맞춰진 두 리스트의 가중합 Σ scalars[i] · points[i].

    증명의 A, B, C, H 커밋먼트가 모두 이 형태이다. 열(column) 순서가
    의미를 가지므로 dict가 아니라 같은 길이의 리스트 두 개를 받는다.
    가중치가 0인 항은 건너뛴다.

    Raises:
        ValueError: 두 리스트의 길이가 다를 때
    """
    if len(points) != len(scalars):
        raise ValueError(
            f"점 {len(points)}개와 스칼라 {len(scalars)}개의 길이가 다릅니다"
        )
    result = None
    for point, scalar in zip(points, scalars):
        if to_fr(scalar) == FR(0):
            continue
        result = ec_add(result, ec_mul(point, scalar))
    return result


def _is_affine(point, coord_type):
    # FR도 FQ의 하위 클래스이므로 정확한 타입으로 비교한다
    return (
        isinstance(point, tuple) and len(point) == 2
        and all(type(c) is coord_type for c in point)
    )


def is_on_g1(point):
    """G1 곡선 위의 점인지 확인 (항등원 포함).

    FQ 좌표 2개짜리 튜플이 아니면 (G2 점, 길이가 다른 튜플 등) False.
    """
    if point is None:
        return True
    return _is_affine(point, FQ) and bn128.is_on_curve(point, bn128.b)


def is_on_g2(point):
    """G2 (twist) 곡선 위의 점인지 확인 (항등원 포함).

    FQ2 좌표 2개짜리 튜플이 아니면 False.
    """
    if point is None:
        return True
    return _is_affine(point, bn128.FQ2) and bn128.is_on_curve(point, bn128.b2)


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc.bn128.pairing과 같이 인자 순서는 (G2, G1)이다.
        어느 한쪽이 항등원이면 페어링을 계산하지 않고 GT_ONE을 돌려준다.

    예시:
        >>> ec_pairing(ec_mul(G2, 5), ec_mul(G1, 3)) == ec_pairing(G2, ec_mul(G1, 15))
        True
    """
    if g1_point is None or g2_point is None:
        return GT_ONE
    return bn128.pairing(g2_point, g1_point)
