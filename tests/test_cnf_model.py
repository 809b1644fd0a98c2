import pytest

from sattools.clause import Clause
from sattools.cnf_model import CNFModel


def test_empty_model_counts_one_variable():
    model = CNFModel()
    assert model.number_of_variables() == 1
    assert model.number_of_clauses() == 0


def test_add_clause_sorts_and_removes_duplicates():
    model = CNFModel()
    assert model.add_clause([2, 1, 2]) is True
    assert model.clauses()[0].literals == [1, 2]


def test_tautology_is_dropped():
    model = CNFModel()
    assert model.add_clause([1, 3, -1]) is False
    assert model.number_of_clauses() == 0
    assert model.number_of_trivial_clauses() == 1


def test_empty_clause_is_rejected():
    with pytest.raises(ValueError):
        CNFModel().add_clause([])


def test_number_of_variables_is_highest_variable():
    model = CNFModel()
    model.add_clause([3, -5])
    model.add_clause([2])
    assert model.number_of_variables() == 5


def test_binary_and_ternary_counts():
    model = CNFModel()
    model.add_clause([1])
    model.add_clause([1, 2])
    model.add_clause([1, -2])
    model.add_clause([1, 2, 3])
    model.add_clause([1, 2, 3, 4])
    assert model.number_of_binary_clauses() == 2
    assert model.number_of_ternary_clauses() == 1
    assert model.number_of_clauses() == 5


def test_add_clause_object_does_not_touch_statistics():
    model = CNFModel()
    clause = Clause([1, 2], True)
    model.add_clause_object(clause)
    assert model.clauses() == [clause]
    assert model.number_of_binary_clauses() == 0
    assert model.occurrence_list(1) == [clause]


def test_occurrence_lists_hold_each_literal():
    model = CNFModel()
    model.add_clause([1, 2])
    model.add_clause([-1, 2])
    first, second = model.clauses()
    assert model.occurrence_list(2) == [first, second]
    assert model.occurrence_list(1) == [first]
    assert model.occurrence_list(-1) == [second]
    assert model.occurrence_list(7) == []


def test_occurrence_list_is_a_copy():
    model = CNFModel()
    model.add_clause([1, 2])
    model.occurrence_list(1).clear()
    assert len(model.occurrence_list(1)) == 1


def test_remove_occurrence():
    model = CNFModel()
    model.add_clause([1, 2])
    clause = model.clauses()[0]
    model.remove_occurrence(1, clause)
    assert model.occurrence_list(1) == []
    assert model.occurrence_list(2) == [clause]
    with pytest.raises(ValueError):
        model.remove_occurrence(1, clause)


def test_clear_detached_clauses():
    model = CNFModel()
    model.add_clause([1, 2])
    model.add_clause([2, 3])
    first, second = model.clauses()
    first.lazy_detach()
    model.clear_detached_clauses()
    assert model.clauses() == [second]


def test_literal_with_shortest_occurrence_list():
    model = CNFModel()
    model.add_clause([1, 2])
    model.add_clause([1, 3])
    model.add_clause([2, 3])
    model.add_clause([3, 4])
    clause = model.clauses()[1]
    assert model.literal_with_shortest_occurrence_list(clause) == 1


def test_shortest_occurrence_keeps_first_on_tie():
    model = CNFModel()
    model.add_clause([1, 2])
    clause = model.clauses()[0]
    assert model.literal_with_shortest_occurrence_list(clause) == 1


def test_shortest_occurrence_of_empty_clause_fails():
    model = CNFModel()
    model.add_clause([1, 2])
    clause = model.clauses()[0]
    clause.lazy_detach()
    with pytest.raises(ValueError):
        model.literal_with_shortest_occurrence_list(clause)