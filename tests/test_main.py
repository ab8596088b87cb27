import pytest

from calc import CalculatorSession
from main import build_parser, main, run_single, handle_command


def test_run_single(capsys):
    assert run_single("2+3*4", degrees=True) == 0
    assert capsys.readouterr().out.strip() == "14"


def test_run_single_reports_errors(capsys):
    assert run_single("5/0", degrees=True) == 1
    assert capsys.readouterr().out == ""


def test_main_with_expression(capsys):
    assert main(build_parser().parse_args(["1000*1000"])) == 0
    assert capsys.readouterr().out.strip() == "1,000,000"


def test_main_in_radians(capsys):
    assert main(build_parser().parse_args(["cos(π)", "--radians"])) == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_main_without_input():
    assert main(build_parser().parse_args([])) == 2


def test_main_batch_from_text_file(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("1+1\n5/0\n", encoding='utf-8')

    assert main(build_parser().parse_args(["--data_path", str(path)])) == 0
    out = capsys.readouterr().out
    assert "1+1 = 2" in out
    assert "5/0 = DivisionByZero" in out


def test_main_batch_saves_results(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("2^10\n", encoding='utf-8')
    output = tmp_path / "out.csv"

    args = build_parser().parse_args(
        ["--data_path", str(path), "--save_results", "--output_path", str(output)])
    assert main(args) == 0
    assert "1024" in output.read_text(encoding='utf-8')


def test_handle_command():
    session = CalculatorSession()
    assert handle_command(session, ':history') == 'Ready to calculate'
    assert handle_command(session, ':mr') == 'Memory is empty'

    session.calculate("9")
    assert handle_command(session, ':sqrt') == '3'
    assert handle_command(session, ':ms') == 'M: 3'
    assert handle_command(session, ':m+') == 'M: 6'
    assert handle_command(session, ':mr') == 'M: 6'
    assert handle_command(session, ':mc') == 'M: 0'
    assert handle_command(session, ':rad') == 'RAD'
    assert not session.degrees
    assert handle_command(session, ':deg') == 'DEG'
    assert handle_command(session, ':pi') == '3.141592653589793'
    assert 'sqrt(9) = 3' in handle_command(session, ':history')

    with pytest.raises(ValueError):
        handle_command(session, ':bogus')
