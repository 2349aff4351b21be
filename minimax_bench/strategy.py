from enum import Enum


class Algorithm(str, Enum):
    BRANCH_AND_BOUND = "branch_and_bound"
    ALPHA_BETA = "alpha_beta"
    P_ALPHA_BETA = "p_alpha_beta"
    PVS = "pvs"
    SCOUT = "scout"
    SSS = "sss"
