"""
zkSNARK Verifier
=================

검증 방정식:

    e(A, B) == e(C, G2) · e(H, T)

τ·G2 = T 를 통해 A(τ)·B(τ) - C(τ) = H(τ)·t(τ) 를 지수 위에서 확인한다.
검증자는 τ도 증인도 보지 않는다. 결과는 항상 bool이며, 곡선 위에 있지 않은
점이 들어오면 예외 대신 False를 돌려준다.
"""

import logging

from zkp.zksnark.field import G2, GT_ONE, ec_pairing, is_on_g1, is_on_g2
from zkp.zksnark.prover import Proof


logger = logging.getLogger(__name__)


def lhs(proof):
    return ec_pairing(proof.B, proof.A)


def rhs(proof, T):
    pairing_cg2 = ec_pairing(G2, proof.C)
    # H가 항등원이면 e(H, T) = 1
    pairing_ht = GT_ONE if proof.H is None else ec_pairing(T, proof.H)
    return pairing_cg2 * pairing_ht


def well_formed(proof, T):
    return (
        is_on_g1(proof.A) and is_on_g2(proof.B) and is_on_g1(proof.C)
        and is_on_g1(proof.H) and is_on_g2(T)
    )


def verify(proof, T):
    if not well_formed(proof, T):
        logger.debug("곡선 위에 있지 않은 점이 포함된 증명")
        return False
    result = lhs(proof) == rhs(proof, T)
    logger.debug("검증 결과: %s", result)
    return result


class Verifier:

    def verify(self, A, B, C, H, T):
        return verify(Proof(A, B, C, H), T)
