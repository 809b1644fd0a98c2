import pytest

from sattools.cnf_stats import CNFStats, LiteralStat


def _stats(clauses):
    stats = CNFStats()
    for clause in clauses:
        stats.add_clause(clause)
    return stats


def test_literal_stat_accumulates():
    stat = LiteralStat("binary clauses")
    stat.add(2, 1, 1)
    stat.add(2, 0, 2)
    assert stat.clauses == 2
    assert stat.literals == 4
    assert stat.positive == 1
    assert stat.negative == 3


def test_counts_by_size():
    stats = _stats([[1], [-2], [1, 2], [1, 2, 3], [1, 2, 3, 4], [1, -2, 3, -4, 5]])
    assert stats.number_of_unary_clauses() == 2
    assert stats.number_of_binary_clauses() == 1
    assert stats.number_of_ternary_clauses() == 1
    assert stats.number_of_large_clauses() == 2


def test_sizes_sum_to_clause_count():
    stats = _stats([[1], [2, 3], [1, 2, 3], [4, 5, 6, 7], [-1, -2]])
    total = (
        stats.number_of_unary_clauses()
        + stats.number_of_binary_clauses()
        + stats.number_of_ternary_clauses()
        + stats.number_of_large_clauses()
    )
    assert total == stats.number_of_clauses()


def test_polarity_counts_match_literals():
    stats = _stats([[1, -2], [-1, -3], [2, 3]])
    assert stats.binary.positive + stats.binary.negative == stats.binary.literals
    assert stats.binary.positive == stats.binary.negative


def test_tautology_is_not_counted():
    stats = CNFStats()
    assert stats.add_clause([2, -2]) is False
    assert stats.number_of_clauses() == 0
    assert stats.trivial_clauses == 1
    assert stats.number_of_binary_clauses() == 0


def test_duplicates_are_removed_before_counting():
    stats = _stats([[4, 4]])
    assert stats.number_of_unary_clauses() == 1
    assert stats.clauses[0].literals == [4]


def test_number_of_variables():
    assert CNFStats().number_of_variables() == 1
    assert _stats([[1, -7], [3]]).number_of_variables() == 7


def test_empty_clause_is_rejected():
    with pytest.raises(ValueError):
        CNFStats().add_clause([])


def test_summarize_reports_counts():
    stats = _stats([[1], [1, 2]])
    report = stats.summarize()
    assert "Number of clauses: 2" in report
    assert " |- unary clauses: 1" in report
    assert " |- large clauses: 0" in report


def test_summarize_of_empty_instance():
    report = CNFStats().summarize()
    assert "Number of clauses: 0" in report