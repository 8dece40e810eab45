"""
zkSNARK Common Reference String (CRS)
======================================

QAP 하나에 대한 신뢰 설정(trusted setup)을 수행한다.

**CRS란?**
  비밀 평가점 τ ("toxic waste")에서 QAP 다항식들을 평가하고,
  그 값을 그룹 원소로 숨긴(commit) 공개 파라미터이다.

  CRS = {
      g1_u: [u_0(τ)·G1, ..., u_{m-1}(τ)·G1]
      g2_v: [v_0(τ)·G2, ..., v_{m-1}(τ)·G2]
      g1_w: [w_0(τ)·G1, ..., w_{m-1}(τ)·G1]
      g1_h: [G1, τ·G1, τ²·G1, ..., τ^{d-1}·G1]   (H(x) 커밋용)
      T:    t(τ)·G2
  }

  평가값이 0인 경우에는 스칼라 곱 대신 항등원을 넣는다.

**τ의 허용 범위**:
  - τ가 제약점 1..n 중 하나이면 t(τ) = 0이 되어 T가 항등원이 되고
    검증 방정식이 무의미해진다.
  - Prover는 H(x)를 0, -1, ..., -(d-1) 에서 표본 추출해 보간한다.
    τ가 이 표본점 중 하나이면 보간된 H가 τ에서 항상 맞아 떨어지므로
    건전성(soundness)이 깨진다.
  따라서 τ를 직접 지정할 때 이 두 경우를 거부하고, 무작위로 뽑을 때는
  [n + 1, p - d] 구간에서 secrets로 균등 추출한다.

**보안**:
  τ를 아는 사람은 임의의 거짓 증명을 만들 수 있다. 여기서는 단일
  당사자가 τ를 만들고 generate() 안에서만 사용한 뒤 버린다. CRS 객체는
  τ를 보관하지 않으며, 공개된 점들로부터 τ를 복원하는 것은 이산로그
  문제만큼 어렵다고 가정한다. 실제 시스템에서는 MPC 세리머니가 필요하다.

사용 예시:
    >>> crs = CRS.generate(qap)          # 무작위 τ
    >>> crs = CRS.generate(qap, tau=4)   # 테스트용 고정 τ
    >>> len(crs.g1_h)                    # CRS.power_count(qap)
"""

import logging
import secrets

from zkp.zksnark.field import FR, G1, G2, CURVE_ORDER, ec_mul, to_fr


logger = logging.getLogger(__name__)


def quotient_domain(size):
    """H(x) 표본점 [0, -1, ..., -(size-1)].

    제약점 1..n과 겹치지 않으므로 표본점에서 t(x) ≠ 0 이다.
    """
    return [FR(0) - FR(j) for j in range(size)]


class CRS:
    """QAP 하나에 묶인 Common Reference String.

    속성:
        g1_u: G1 점 리스트, u_i(τ)·G1
        g2_v: G2 점 리스트, v_i(τ)·G2
        g1_w: G1 점 리스트, w_i(τ)·G1
        g1_h: G1 점 리스트, τ^j·G1 (j = 0..d-1)
        T: G2 점, t(τ)·G2
    """

    __slots__ = ("g1_u", "g2_v", "g1_w", "g1_h", "T")

    def __init__(self, g1_u, g2_v, g1_w, g1_h, T):
        self.g1_u = g1_u
        self.g2_v = g2_v
        self.g1_w = g1_w
        self.g1_h = g1_h
        self.T = T

    def __eq__(self, other):
        if not isinstance(other, CRS):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    @property
    def num_variables(self):
        return len(self.g1_u)

    @staticmethod
    def power_count(qap):
        """g1_h에 담을 τ 거듭제곱의 개수 d.

        만족하는 증인의 H(x) 차수는 (n-1) + (n-1) - n = n - 2 이하이므로
        d ≥ n - 1이면 충분하다. 증인 길이 m을 기본으로 하고 제약이 더 많은
        회로에서는 n으로 늘린다.
        """
        return max(qap.num_variables, qap.num_constraints)

    @classmethod
    def generate(cls, qap, tau=None):
        """CRS를 생성한다.

        Args:
            qap: QAP
            tau: 비밀 평가점 (정수 또는 FR). None이면 secrets로 무작위 추출.
                 호출자는 넘긴 값을 즉시 폐기해야 한다.

        Returns:
            CRS

        Raises:
            ValueError: tau가 t(x)의 근이거나 H(x) 표본점일 때
        """
        d = cls.power_count(qap)
        n = qap.num_constraints

        if tau is None:
            # [n + 1, p - d]
            tau = FR(n + 1 + secrets.randbelow(CURVE_ORDER - d - n))
        else:
            tau = to_fr(tau)
            if 1 <= int(tau) <= n:
                raise ValueError(f"τ는 제약점 1..{n}과 달라야 합니다 (t(τ) = 0)")
            if int(tau) == 0 or int(tau) > CURVE_ORDER - d:
                raise ValueError("τ가 H(x) 표본점과 겹칩니다")

        logger.debug("CRS 생성: 변수 %d개, 제약 %d개, τ 거듭제곱 %d개",
                     qap.num_variables, n, d)

        evaluation = qap.evaluate_at(tau)

        g1_u = [ec_mul(G1, val) for val in evaluation.u]
        g2_v = [ec_mul(G2, val) for val in evaluation.v]
        g1_w = [ec_mul(G1, val) for val in evaluation.w]

        # [G1, τ·G1, τ²·G1, ...]
        g1_h = []
        tau_power = FR(1)
        for _ in range(d):
            g1_h.append(ec_mul(G1, tau_power))
            tau_power = tau_power * tau

        T = ec_mul(G2, evaluation.t)

        del tau, tau_power, evaluation
        return cls(g1_u, g2_v, g1_w, g1_h, T)
