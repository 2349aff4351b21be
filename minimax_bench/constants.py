"""Defaults shared by the benchmark driver and the command line."""

from minimax_bench.strategy import Algorithm

# Benchmark order, as in Muszycka & Shinghal (1985): algorithms A to F.
ALGORITHM_ORDER = (
    Algorithm.BRANCH_AND_BOUND,
    Algorithm.ALPHA_BETA,
    Algorithm.P_ALPHA_BETA,
    Algorithm.PVS,
    Algorithm.SCOUT,
    Algorithm.SSS,
)

DEFAULT_SEED = 314159
DEFAULT_TRIALS = 50

STOCKMAN_NAME = "Stockman, G.C. (1979)"

UT3_DEPTH = 4
UNIFORM_DEPTH = 16
CHESS_DEPTH = 3

# (depth, width) pairs of the hypothetical tree suite.
DEPTH_WIDTH_PAIRS = (
    (2, 2), (2, 3), (2, 4), (2, 5), (2, 6), (2, 8), (2, 10), (2, 24),
    (3, 2), (3, 3), (3, 4), (3, 5), (3, 6), (3, 8), (3, 10),
    (4, 2), (4, 3), (4, 4), (4, 5),
    (5, 2), (5, 3), (5, 4),
    (6, 2), (6, 3),
)
