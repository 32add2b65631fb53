import pytest

from rmlkit.cli import build_parser, main


@pytest.fixture
def config_path(sqlite_path, tmp_path):
    path = tmp_path / "access.yaml"
    path.write_text(
        f"dsn: {sqlite_path}\n"
        "database_type: sqlite\n"
        "query: SELECT id, price FROM product ORDER BY id\n"
    )
    return str(path)


def test_parser_defaults():
    args = build_parser().parse_args(["access.yaml"])
    assert args.config == "access.yaml"
    assert args.output is None
    assert not args.datatypes
    assert not args.verbose


def test_writes_csv_file(config_path, tmp_path):
    out = tmp_path / "out.csv"
    assert main([config_path, "-o", str(out)]) == 0
    assert out.read_bytes() == b"id,price\r\n1,3\r\n2,3.14\r\n3,10\r\n"


def test_writes_csv_to_stdout(config_path, capsysbinary):
    assert main([config_path]) == 0
    assert capsysbinary.readouterr().out == b"id,price\r\n1,3\r\n2,3.14\r\n3,10\r\n"


def test_prints_datatypes(config_path, tmp_path, capsys):
    main([config_path, "-o", str(tmp_path / "out.csv"), "--datatypes"])
    err = capsys.readouterr().err
    assert "id: http://www.w3.org/2001/XMLSchema#integer" in err
    assert "price: http://www.w3.org/2001/XMLSchema#double" in err


def test_missing_config_argument():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
