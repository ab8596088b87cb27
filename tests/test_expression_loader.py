import pandas as pd
import pytest

from calc import ExpressionEvaluator
from data.expression_loader import load_expressions, check_failed_rows, save_results


def test_load_from_csv(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({'id': [1, 2, 3], 'expression': ["1+1", "", "2(3)"]}).to_csv(path, index=False)

    expressions = load_expressions(str(path))
    assert list(expressions) == ["1+1", "2(3)"]
    assert list(expressions.index) == [0, 1]


def test_load_from_csv_with_custom_column(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({'formula': ["NaN", "3*3"]}).to_csv(path, index=False)

    expressions = load_expressions(str(path), expression_column='formula')
    assert list(expressions) == ["NaN", "3*3"]


def test_missing_column(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({'formula': ["1"]}).to_csv(path, index=False)

    with pytest.raises(ValueError):
        load_expressions(str(path))


def test_load_from_text_file(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("1+1\n\n  2^3  \n5/0\n", encoding='utf-8')

    assert list(load_expressions(str(path))) == ["1+1", "2^3", "5/0"]


def test_check_failed_rows_and_save(tmp_path):
    results = ExpressionEvaluator().evaluate_many(["1+1", "5/0", "1/0", "(1"])
    counts = check_failed_rows(results)
    assert counts["DivisionByZero"] == 2
    assert counts["MalformedExpression"] == 1

    output = save_results(results, str(tmp_path / "out.csv"))
    saved = pd.read_csv(output)
    assert list(saved.columns) == ['expression', 'result', 'error']
    assert saved.loc[0, 'result'] == 2
    assert saved['result'].isna().sum() == 3


def test_check_failed_rows_when_all_succeed():
    results = ExpressionEvaluator().evaluate_many(["1", "2"])
    assert check_failed_rows(results).empty
