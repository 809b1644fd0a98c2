from sattools.cnf_model import CNFModel
from sattools.cnf_writer import dump, dumps


def _model(clauses):
    model = CNFModel()
    for clause in clauses:
        model.add_clause(clause)
    return model


def test_header_line():
    model = _model([[1, -3], [2]])
    assert dumps(model).splitlines()[0] == "p cnf 3 2"


def test_clause_lines_end_with_zero():
    text = dumps(_model([[-1, 2]]))
    assert text.endswith("-1 2 0 \n")


def test_clauses_round_trip_through_text():
    clauses = [[1, -2], [2, 3, -4], [5]]
    model = _model(clauses)
    body = dumps(model).splitlines()[1:]
    parsed = [[int(token) for token in line.split()][:-1] for line in body]
    assert parsed == [clause.literals for clause in model.clauses()]


def test_one_line_per_clause():
    model = _model([[1], [2], [3, 4]])
    assert len(dumps(model).splitlines()) == model.number_of_clauses() + 1


def test_dump_writes_file(tmp_path):
    model = _model([[1, 2], [-2]])
    path = tmp_path / "out.cnf"
    dump(path, model)
    assert path.read_text(encoding="ascii") == dumps(model)