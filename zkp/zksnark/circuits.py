"""
예제 회로 모음
==============

데모와 테스트에서 쓰는 R1CS 회로들. 각 함수는 (ConstraintSystem, 증인)을 돌려준다.
증인의 0번 슬롯은 상수 1이다.

| 이름           | 계산                 | 증인                                  |
|----------------|----------------------|---------------------------------------|
| multiplication | a · b = c            | [1, a, b, c]                          |
| sum_product    | (a + b)·(c + d) = out| [1, a, b, c, d, a+b, c+d, out]        |
| triple_product | x · y · z            | [1, x, y, z, x·y, y·z, x·y·z]         |
| quadratic      | y = x² + 2x + 3      | [1, x, y, x², 2x, x²+2x]              |
"""

from zkp.zksnark.r1cs import ConstraintSystem


def multiplication(a=3, b=4):
    cs = ConstraintSystem()
    cs.add_constraint([0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1])
    return cs, [1, a, b, a * b]


def sum_product(a=2, b=3, c=5, d=7):
    cs = ConstraintSystem()
    # (a + b) * 1 = tmp1
    cs.add_constraint(
        [0, 1, 1, 0, 0, 0, 0, 0],
        [1, 0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 1, 0, 0],
    )
    # (c + d) * 1 = tmp2
    cs.add_constraint(
        [0, 0, 0, 1, 1, 0, 0, 0],
        [1, 0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 1, 0],
    )
    # tmp1 * tmp2 = out
    cs.add_constraint(
        [0, 0, 0, 0, 0, 1, 0, 0],
        [0, 0, 0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 0, 0, 0, 1],
    )
    return cs, [1, a, b, c, d, a + b, c + d, (a + b) * (c + d)]


def triple_product(x=3, y=4, z=12):
    cs = ConstraintSystem()
    # x * y = xy
    cs.add_constraint(
        [0, 1, 0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 0, 0],
    )
    # y * z = yz
    cs.add_constraint(
        [0, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 1, 0],
    )
    # xy * z = xyz
    cs.add_constraint(
        [0, 0, 0, 0, 1, 0, 0],
        [0, 0, 0, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 1],
    )
    return cs, [1, x, y, z, x * y, y * z, x * y * z]


def quadratic(x=2):
    cs = ConstraintSystem()
    # x * x = x²
    cs.add_constraint(
        [0, 1, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0],
        [0, 0, 0, 1, 0, 0],
    )
    # 2 * x = 2x
    cs.add_constraint(
        [2, 0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 1, 0],
    )
    # (x² + 2x) * 1 = x² + 2x
    cs.add_constraint(
        [0, 0, 0, 1, 1, 0],
        [1, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 1],
    )
    # (x² + 2x + 3) * 1 = y
    cs.add_constraint(
        [3, 0, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0],
    )
    return cs, [1, x, x * x + 2 * x + 3, x * x, 2 * x, x * x + 2 * x]


CIRCUITS = {
    "multiplication": multiplication,
    "sum_product": sum_product,
    "triple_product": triple_product,
    "quadratic": quadratic,
}
