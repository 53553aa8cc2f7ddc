"""gamma_beta.core.gamma.lanczos

53-bit Lanczos approximation (N=13, g=6.024680040776729583740234375).

    Gamma(z) = lanczos_sum(z) * (z + g - 0.5)^(z - 0.5) / exp(z + g - 0.5)

The sum is a ratio of two degree-12 polynomials in z. Callers combine it with
the power and exponential terms themselves so that overflow can be avoided
for large z. Max experimental error of the coefficient set is 1.2e-17.

Reference: Boost.Math, lanczos.hpp (coefficients by Godfrey/Toth method).
"""

from __future__ import annotations

from ..series.polynomial import evaluate_rational

# Lanczos constant g
G = 6.024680040776729583740234375
# g - 0.5
GMH = 5.524680040776729583740234375

# Common denominator: z (z+1) ... (z+11) expanded, lowest degree first
_DENOM = (
    0.0,
    39916800.0,
    120543840.0,
    150917976.0,
    105258076.0,
    45995730.0,
    13339535.0,
    2637558.0,
    357423.0,
    32670.0,
    1925.0,
    66.0,
    1.0,
)

_NUM = (
    23531376880.41075968857200767445163675473,
    42919803642.64909876895789904700198885093,
    35711959237.35566804944018545154716670596,
    17921034426.03720969991975575445893111267,
    6039542586.35202800506429164430729792107,
    1439720407.311721673663223072794912393972,
    248874557.8620541565114603864132294232163,
    31426415.58540019438061423162831820536287,
    2876370.628935372441225409051620849613599,
    186056.2653952234950402949897160456992822,
    8071.672002365816210638002902272250613822,
    210.8242777515793458725097339207133627117,
    2.506628274631000270164908177133837338626,
)

# _NUM divided by exp(g)
_NUM_EXPG_SCALED = (
    56906521.91347156388090791033559122686859,
    103794043.1163445451906271053616070238554,
    86363131.28813859145546927288977868422342,
    43338889.32467613834773723740590533316085,
    14605578.08768506808414169982791359218571,
    3481712.15498064590882071018964774556468,
    601859.6171681098786670226533699352302507,
    75999.29304014542649875303443598909137092,
    6955.999602515376140356310115515198987526,
    449.9445569063168119446858607650988409623,
    19.51992788247617482847860966235652136208,
    0.5098416655656676188125178644804694509993,
    0.006061842346248906525783753964555936883222,
)


def lanczos_sum(z: float) -> float:
    """Lanczos rational sum at z (z > 0)."""
    return evaluate_rational(_NUM, _DENOM, z)


def lanczos_sum_exp_g_scaled(z: float) -> float:
    """Lanczos rational sum at z divided by exp(g)."""
    return evaluate_rational(_NUM_EXPG_SCALED, _DENOM, z)
