import pytest

from minimax_bench.constants import ALGORITHM_ORDER
from minimax_bench.games import ExplicitTree, HypotheticalTree, StockmanTree, UniformTree
from minimax_bench.search import AlphaBetaSearch, PAlphaBetaSearch, PVSSearch, SearchConfig, get_search_algorithm
from minimax_bench.strategy import Algorithm
from minimax_bench.tree import Side, ValueDomain


def minimax(tree, node):
    if tree.is_leaf(node):
        return tree.leaf_value(node)
    values = [minimax(tree, child) for child in tree.children(node)]
    return max(values) if tree.side_to_move(node) is Side.MAX else min(values)


def generate_trees():
    trees = [
        ExplicitTree([[3, 1], [4, 2]]),
        ExplicitTree([[2, 4], [1, 3]]),
        ExplicitTree([[5, [1, 7]], [[8, 2], 6], 4]),
        ExplicitTree([[1, 1], [1, 1]]),
        ExplicitTree([[-3, 0, 2], [9, -7], [4]]),
        ExplicitTree([[2, -4, 0], [-4, 5, 0, 3]]),
        ExplicitTree([[[2, 9], [4, 4]], [[-1, 0], [6, 3]]], root_side=Side.MIN),
    ]
    for seed in range(5):
        trees.append(UniformTree(6, seed))
    for depth, width in ((2, 5), (3, 3), (4, 2), (3, 4)):
        for seed in range(4):
            trees.append(HypotheticalTree(depth, width, seed))
    return trees


def test_all_algorithms_agree_with_minimax():
    for tree in generate_trees():
        expected = minimax(tree, tree.root())
        for name in ALGORITHM_ORDER:
            result = get_search_algorithm(name).search(tree.root(), tree)
            assert result.value == expected, (name, tree)


def test_pruning_never_costs_more_than_branch_and_bound():
    # Uniform and explicit trees include tied leaf values
    for tree in generate_trees():
        full = get_search_algorithm(Algorithm.BRANCH_AND_BOUND).search(tree.root(), tree).count
        for name in (Algorithm.ALPHA_BETA, Algorithm.SSS):
            assert get_search_algorithm(name).search(tree.root(), tree).count <= full, name


def test_principal_variation_reaches_the_value():
    for tree in generate_trees():
        for name in (Algorithm.BRANCH_AND_BOUND, Algorithm.ALPHA_BETA, Algorithm.SSS):
            result = get_search_algorithm(name).search(tree.root(), tree)
            node = tree.root()
            for index in result.line:
                node = tree.children(node)[index]
            assert tree.is_leaf(node)
            assert tree.leaf_value(node) == result.value, name


def test_search_is_idempotent():
    tree = HypotheticalTree(3, 4, 7)
    for name in ALGORITHM_ORDER:
        search = get_search_algorithm(name)
        first = search.search(tree.root(), tree)
        second = search.search(tree.root(), tree)
        assert (first.value, first.count, first.line) == (second.value, second.count, second.line)
        assert search.metrics['searches'] == 2
        assert search.metrics['leaf_evaluations'] == first.count + second.count
        search.reset_metrics()
        assert search.metrics['searches'] == 0


def test_single_leaf_tree():
    for side in Side:
        tree = ExplicitTree(17, root_side=side)
        for name in ALGORITHM_ORDER:
            result = get_search_algorithm(name).search(tree.root(), tree)
            assert result.value == 17
            assert result.count == 1
            assert result.line == ()


def test_min_root_values_are_from_max_point_of_view():
    nested = [[3, 1], [4, 2]]
    tree = ExplicitTree(nested, root_side=Side.MIN)
    # MIN picks the branch whose MAX reply is smallest: min(max(3, 1), max(4, 2)) = 3
    for name in ALGORITHM_ORDER:
        assert get_search_algorithm(name).search(tree.root(), tree).value == 3, name


def test_subtree_search():
    tree = UniformTree(5, 11)
    for node in (2, 3, 6):
        expected = minimax(tree, node)
        for name in ALGORITHM_ORDER:
            assert get_search_algorithm(name).search(node, tree).value == expected


def test_window_containing_the_value():
    tree = ExplicitTree([[5, [1, 7]], [[8, 2], 6], 4])
    for name in (Algorithm.ALPHA_BETA, Algorithm.P_ALPHA_BETA, Algorithm.PVS, Algorithm.SCOUT):
        result = get_search_algorithm(name).search(tree.root(), tree, SearchConfig(alpha=0, beta=10))
        assert result.value == 6, name


def test_alpha_beta_window_fails_high_and_low():
    tree = ExplicitTree([[5, [1, 7]], [[8, 2], 6], 4])
    search = get_search_algorithm(Algorithm.ALPHA_BETA)
    assert search.search(tree.root(), tree, SearchConfig(alpha=0, beta=3)).value >= 3
    assert search.search(tree.root(), tree, SearchConfig(alpha=7, beta=9)).value <= 7


def test_branch_and_bound_bound_cuts_off():
    tree = ExplicitTree([[5, 6], [9, 8]])
    search = get_search_algorithm(Algorithm.BRANCH_AND_BOUND)
    unbounded = search.search(tree.root(), tree)
    bounded = search.search(tree.root(), tree, SearchConfig(beta=5))
    assert unbounded.value == 8
    assert bounded.value >= 5
    assert bounded.count < unbounded.count


@pytest.mark.parametrize("name", list(ALGORITHM_ORDER))
def test_float_values(name):
    tree = ExplicitTree([[0.5, -1.25], [2.75, 0.25]], domain=ValueDomain(-10, 10, 0.25))
    assert get_search_algorithm(name).search(tree.root(), tree).value == 0.25


def test_sss_tied_values_stay_within_alpha_beta():
    # Equal merits on both sides of the root: the left subtree must be finished first
    tree = ExplicitTree([[2, -4, 0], [-4, 5, 0, 3]])
    alpha_beta = get_search_algorithm(Algorithm.ALPHA_BETA).search(tree.root(), tree)
    sss = get_search_algorithm(Algorithm.SSS).search(tree.root(), tree)
    assert sss.value == alpha_beta.value == -4
    assert sss.count == 4
    assert sss.count <= alpha_beta.count


class WindowRecordingPVS(PVSSearch):

    def __init__(self):
        super().__init__()
        self.windows = []

    def _pvs(self, node, alpha, beta, leaves):
        self.windows.append((alpha, beta))
        return super()._pvs(node, alpha, beta, leaves)


class WindowRecordingAlphaBeta(AlphaBetaSearch):

    def __init__(self):
        super().__init__()
        self.windows = []

    def _alpha_beta(self, node, alpha, beta, leaves):
        self.windows.append((alpha, beta))
        return super()._alpha_beta(node, alpha, beta, leaves)


class WindowRecordingPAlphaBeta(PAlphaBetaSearch):

    def __init__(self):
        super().__init__()
        self.windows = []

    def _f_alpha_beta(self, node, alpha, beta, leaves):
        self.windows.append((alpha, beta))
        return super()._f_alpha_beta(node, alpha, beta, leaves)


def test_every_recursive_call_gets_an_open_window():
    trees = [StockmanTree(), HypotheticalTree(4, 3, 1)] + generate_trees()
    for tree in trees:
        for search in (WindowRecordingPVS(), WindowRecordingAlphaBeta(), WindowRecordingPAlphaBeta()):
            search.search(tree.root(), tree)
            for alpha, beta in search.windows:
                assert alpha < beta, (search.name, alpha, beta)
