"""
zkSNARK 데이터 직렬화/역직렬화 헬퍼
====================================

G1, G2, CRS, Proof를 JSON으로 옮길 수 있는 형태(10진 문자열, 항등원은 None)로
변환한다. CLI 출력과 CRS 결정성 비교에 사용한다.

좌표 표현:
    G1: [x, y]
    G2: [[x.c0, x.c1], [y.c0, y.c1]]

역직렬화는 키를 엄격하게 읽는다. 키가 빠진 payload는 항등원으로 채우지
않고 KeyError를 낸다.
"""

import json

from py_ecc import bn128
from py_ecc.fields import bn128_FQ as FQ

from zkp.zksnark.crs import CRS
from zkp.zksnark.prover import Proof


# ─── 점 ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(coord.n) for coord in point]


def deserialize_g1(data):
    """[str, str] or None → G1 point"""
    if data is None:
        return None
    x, y = data
    return (FQ(int(x)), FQ(int(y)))


def serialize_g2(point):
    """G2 point → [[str, str], [str, str]] or None"""
    if point is None:
        return None
    return [[str(int(c)) for c in coord.coeffs] for coord in point]


def deserialize_g2(data):
    """[[str, str], [str, str]] or None → G2 point"""
    if data is None:
        return None
    x, y = data
    return (
        bn128.FQ2([int(c) for c in x]),
        bn128.FQ2([int(c) for c in y]),
    )


# ─── CRS ───

def serialize_crs(crs):
    """CRS → dict"""
    return {
        "g1_u": [serialize_g1(p) for p in crs.g1_u],
        "g2_v": [serialize_g2(p) for p in crs.g2_v],
        "g1_w": [serialize_g1(p) for p in crs.g1_w],
        "g1_h": [serialize_g1(p) for p in crs.g1_h],
        "T": serialize_g2(crs.T),
    }


def deserialize_crs(data):
    """dict → CRS"""
    return CRS(
        [deserialize_g1(p) for p in data["g1_u"]],
        [deserialize_g2(p) for p in data["g2_v"]],
        [deserialize_g1(p) for p in data["g1_w"]],
        [deserialize_g1(p) for p in data["g1_h"]],
        deserialize_g2(data["T"]),
    )


# ─── Proof ───

def serialize_proof(proof):
    """Proof → dict"""
    return {
        "A": serialize_g1(proof.A),
        "B": serialize_g2(proof.B),
        "C": serialize_g1(proof.C),
        "H": serialize_g1(proof.H),
    }


def deserialize_proof(data):
    """dict → Proof"""
    return Proof(
        deserialize_g1(data["A"]),
        deserialize_g2(data["B"]),
        deserialize_g1(data["C"]),
        deserialize_g1(data["H"]),
    )


def to_json(data):
    """직렬화된 dict → 키 정렬된 JSON 문자열 (바이트 단위 비교용)"""
    return json.dumps(data, sort_keys=True, separators=(",", ":"))


# ─── 표시용 ───

def _shorten(s):
    if len(s) <= 8:
        return s
    return s[:4] + "..." + s[-4:]


def g1_short(point):
    """G1 point → 축약 문자열"""
    if point is None:
        return "∞"
    return f"({_shorten(str(int(point[0])))}, {_shorten(str(int(point[1])))})"


def g2_short(point):
    """G2 point → 축약 문자열"""
    if point is None:
        return "∞"
    x0 = str(int(point[0].coeffs[0]))
    x1 = str(int(point[0].coeffs[1]))
    return f"({_shorten(x0)}+{_shorten(x1)}i, ...)"
