from minimax_bench.games import ExplicitTree, HypotheticalTree, Ordering, ReorderedTree
from minimax_bench.search import get_search_algorithm
from minimax_bench.strategy import Algorithm
from minimax_bench.tree import Side


def count(name, tree):
    return get_search_algorithm(name).search(tree.root(), tree).count


def generate_pairs():
    for depth, width in ((2, 4), (3, 3), (4, 2), (3, 5)):
        for seed in range(3):
            yield HypotheticalTree(depth, width, seed)


def test_reordered_tree_sorts_children():
    base = ExplicitTree([[3, 1], [4, 2]])
    best = ReorderedTree(base, Ordering.BEST)
    worst = ReorderedTree(base, "worst")

    assert [best.minimax_value(child) for child in best.children(best.root())] == [2, 1]
    assert [worst.minimax_value(child) for child in worst.children(worst.root())] == [1, 2]
    # MIN nodes: best for MIN is the smallest value
    assert best.children((0,)) == [(0, 1), (0, 0)]
    assert worst.children((0,)) == [(0, 0), (0, 1)]
    assert best.side_to_move((0,)) is Side.MIN


def test_reordered_tree_keeps_base_labels():
    base = HypotheticalTree(2, 3, 5)
    tree = ReorderedTree(base, Ordering.BEST)
    root = tree.root()
    children = tree.children(root)
    for index, child in enumerate(children):
        assert tree.move_label(root, index) == str(child.index)


def test_best_ordering_helps_null_window_searches():
    for base in generate_pairs():
        tree = ReorderedTree(base, Ordering.BEST)
        alpha_beta = count(Algorithm.ALPHA_BETA, tree)
        assert count(Algorithm.PVS, tree) <= alpha_beta
        assert count(Algorithm.SCOUT, tree) <= alpha_beta


def test_worst_ordering_costs_alpha_beta_more():
    for base in generate_pairs():
        best = ReorderedTree(base, Ordering.BEST)
        worst = ReorderedTree(base, Ordering.WORST)
        assert count(Algorithm.ALPHA_BETA, worst) >= count(Algorithm.ALPHA_BETA, best)
        # Deep cut-offs survive worst ordering from depth 4 on
        if base.depth <= 3:
            assert count(Algorithm.ALPHA_BETA, worst) == base.num_leaves
            assert count(Algorithm.BRANCH_AND_BOUND, worst) == base.num_leaves


def test_worst_ordering_costs_null_window_searches_more():
    for base in generate_pairs():
        best = ReorderedTree(base, Ordering.BEST)
        worst = ReorderedTree(base, Ordering.WORST)
        for name in (Algorithm.PVS, Algorithm.SCOUT):
            assert count(name, worst) >= count(name, best), name


def test_reordering_keeps_the_value():
    for base in generate_pairs():
        expected = get_search_algorithm(Algorithm.ALPHA_BETA).search(base.root(), base).value
        for ordering in Ordering:
            tree = ReorderedTree(base, ordering)
            assert get_search_algorithm(Algorithm.SSS).search(tree.root(), tree).value == expected
