import pytest

from zkp.zksnark.circuits import multiplication, sum_product, triple_product
from zkp.zksnark.qap import QAP
from zkp.zksnark.crs import CRS
from zkp.zksnark.prover import generate_proof


# ── 테스트 상수 ──
# 제약점 1..n 및 H(x) 표본점 0, -1, ... 과 겹치지 않는 고정 τ
TOXIC_TAU = 123456789
MULTIPLICATION_TAU = 4


@pytest.fixture(scope="session")
def multiplication_circuit():
    """a · b = c, 증인 [1, 3, 4, 12]"""
    return multiplication()


@pytest.fixture(scope="session")
def multiplication_qap(multiplication_circuit):
    cs, _ = multiplication_circuit
    return QAP.from_r1cs(cs)


@pytest.fixture(scope="session")
def multiplication_crs(multiplication_qap):
    return CRS.generate(multiplication_qap, tau=MULTIPLICATION_TAU)


@pytest.fixture(scope="session")
def sum_product_circuit():
    """(a + b)·(c + d) = out, 증인 [1, 2, 3, 5, 7, 5, 12, 60]"""
    return sum_product()


@pytest.fixture(scope="session")
def sum_product_qap(sum_product_circuit):
    cs, _ = sum_product_circuit
    return QAP.from_r1cs(cs)


@pytest.fixture(scope="session")
def sum_product_crs(sum_product_qap):
    return CRS.generate(sum_product_qap, tau=TOXIC_TAU)


@pytest.fixture(scope="session")
def sum_product_proof(sum_product_circuit, sum_product_qap, sum_product_crs):
    _, witness = sum_product_circuit
    return generate_proof(sum_product_qap, sum_product_crs, witness)


@pytest.fixture(scope="session")
def triple_product_circuit():
    """x · y · z, 증인 [1, 3, 4, 12, 12, 48, 144]"""
    return triple_product()


@pytest.fixture(scope="session")
def triple_product_qap(triple_product_circuit):
    cs, _ = triple_product_circuit
    return QAP.from_r1cs(cs)


@pytest.fixture(scope="session")
def triple_product_crs(triple_product_qap):
    # 무작위 τ
    return CRS.generate(triple_product_qap)
