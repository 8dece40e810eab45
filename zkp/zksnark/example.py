"""
zkSNARK E2E 데모: R1CS → QAP → CRS → Prover → Verifier
=======================================================

이 스크립트는 QAP 기반 zkSNARK 파이프라인의 전체 흐름을 시연한다.

실행:
    python -m zkp.zksnark.example
    python -m zkp.zksnark.example --circuit sum_product --tau 123456789
    python -m zkp.zksnark.example --corrupt           # 잘못된 증인 → 검증 실패
    python -m zkp.zksnark.example --json              # 증명을 JSON으로 출력

흐름:
    1. 회로 구성 및 증인 확인
    2. R1CS → QAP 변환
    3. CRS 생성 (trusted setup)
    4. 증명 생성
    5. 증명 검증
    6. 조작된 증명 검증

종료 코드:
    0: 검증 성공
    1: 잘못된 입력 (ValueError)
    2: 증명이 거부됨
"""

import argparse
import logging
import sys

from zkp.zksnark.field import G1, ec_add
from zkp.zksnark.circuits import CIRCUITS
from zkp.zksnark.qap import QAP
from zkp.zksnark.crs import CRS
from zkp.zksnark.prover import Proof, generate_proof
from zkp.zksnark.verifier import verify
from zkp.zksnark.serializers import g1_short, g2_short, serialize_proof, to_json


def build_parser():
    parser = argparse.ArgumentParser(
        description="Build an R1CS circuit, run the trusted setup, prove a witness and verify the proof."
    )
    parser.add_argument(
        "--circuit",
        type=str,
        choices=sorted(CIRCUITS),
        default="multiplication",
        help="Example circuit to prove",
    )
    parser.add_argument(
        "--tau", type=int, default=None, help="Fixed secret evaluation point (random when omitted)"
    )
    parser.add_argument(
        "--corrupt", action="store_true", help="Add 1 to the last witness entry before proving"
    )
    parser.add_argument(
        "--check-witness", action="store_true", help="Reject an unsatisfying witness before proving"
    )
    parser.add_argument("--json", action="store_true", help="Print the proof as JSON only")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(circuit_name, tau=None, corrupt=False, check_witness=False, quiet=False):
    """파이프라인을 한 번 실행하고 (proof, 검증 결과)를 돌려준다.

    Raises:
        ValueError: τ가 허용 범위 밖이거나 check_witness=True인데 증인이
                    제약을 만족하지 않을 때
    """
    say = (lambda *args: None) if quiet else print

    # ── 1. 회로 구성 ──
    say(f"\n[1] 회로 구성: {circuit_name}")
    cs, witness = CIRCUITS[circuit_name]()
    if corrupt:
        witness = witness[:-1] + [witness[-1] + 1]
    say(f"    제약 수 n: {cs.num_constraints}")
    say(f"    변수 수 m: {cs.num_variables}")
    say(f"    증인: {witness}")

    unsatisfied = cs.unsatisfied(witness)
    for i in range(cs.num_constraints):
        ok = i not in unsatisfied
        say(f"      제약 {i + 1}: {'✓' if ok else '✗'}")

    # ── 2. QAP ──
    say("\n[2] R1CS → QAP 변환...")
    qap = QAP.from_r1cs(cs)
    say(f"    t(x) 차수: {qap.t.degree}")
    say(f"    t(x) 나눗셈 성립: {'예' if qap.is_satisfied_by(witness) else '아니오'}")

    # ── 3. CRS ──
    say("\n[3] CRS 생성 (trusted setup)...")
    crs = CRS.generate(qap, tau=tau)
    say(f"    τ: {'고정값' if tau is not None else '무작위'}")
    say(f"    τ 거듭제곱 수 d: {len(crs.g1_h)}")
    say(f"    T = t(τ)·G2: {g2_short(crs.T)}")

    # ── 4. 증명 생성 ──
    say("\n[4] 증명 생성...")
    proof = generate_proof(qap, crs, witness, check_witness=check_witness)
    say(f"    A: {g1_short(proof.A)}")
    say(f"    B: {g2_short(proof.B)}")
    say(f"    C: {g1_short(proof.C)}")
    say(f"    H: {g1_short(proof.H)}")

    # ── 5. 검증 ──
    say("\n[5] 증명 검증...")
    result = verify(proof, crs.T)
    say(f"    검증 결과: {'성공 ✓' if result else '실패 ✗'}")

    # ── 6. 조작된 증명 테스트 ──
    # C에 G1을 더하면 페어링 검사에서 실패해야 한다.
    if not quiet:
        say("\n[6] 조작된 증명으로 검증 (C 변조)...")
        fake_proof = Proof(proof.A, proof.B, ec_add(proof.C, G1), proof.H)
        wrong_result = verify(fake_proof, crs.T)
        say(f"    검증 결과: {'성공 ✓' if wrong_result else '실패 ✗ (예상대로 실패)'}")

    return proof, result


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.json:
        print("=" * 60)
        print("  zkSNARK (QAP) Zero-Knowledge Proof Demo")
        print(f"  회로: {args.circuit}")
        print("=" * 60)

    try:
        proof, result = run(
            args.circuit,
            tau=args.tau,
            corrupt=args.corrupt,
            check_witness=args.check_witness,
            quiet=args.json,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(to_json(serialize_proof(proof)))
    else:
        print("\n" + "=" * 60)
        print(f"  데모 완료: {'증명 승인' if result else '증명 거부'}")
        print("=" * 60)

    return 0 if result else 2


if __name__ == "__main__":
    sys.exit(main())
