from sattools.cnf_model import CNFModel
from sattools.implication_graph import BinaryImplicationGraph


def _graph(clauses):
    model = CNFModel()
    for clause in clauses:
        model.add_clause(clause)
    return BinaryImplicationGraph(model)


def test_resolve_finds_first_literal():
    graph = _graph([[1, 2]])
    assert graph.resolve([1, -2]) == 1


def test_resolve_finds_second_literal():
    graph = _graph([[1, 2]])
    assert graph.resolve([-1, 2]) == 2


def test_resolve_unknown_clause():
    graph = _graph([[1, 2]])
    assert graph.resolve([3, 4]) is None


def test_resolve_ignores_non_binary_clauses():
    graph = _graph([[1, 2]])
    assert graph.resolve([1, -2, 3]) is None
    assert graph.resolve([1]) is None


def test_only_binary_clauses_enter_the_graph():
    graph = _graph([[1, 2, 3], [4]])
    assert str(graph) == ""


def test_add_binary_clause():
    graph = _graph([])
    graph.add_binary_clause(5, 6)
    assert graph.resolve([5, -6]) == 5


def test_str_lists_implications():
    graph = _graph([[1, 2]])
    text = str(graph)
    assert "[1]:-2 \n" in text
    assert "[2]:-1 \n" in text