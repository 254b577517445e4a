from application.address_book import AddressBookModel
from core import Person
from interface.cli_shell import PaybackShell


def _model():
    return AddressBookModel([
        Person(240001, "Alex Yeoh", "87438807", "alex@example.com", "Geylang", 2024),
        Person(240002, "Bernice Yu", "99272758", "bernice@example.com", "Serangoon", 2024, ("friends",)),
    ])


def test_exit_words_end_session():
    shell = PaybackShell(_model(), session=object())
    for word in ("exit", "QUIT", " bye "):
        assert shell.execute_line(word) is None


def test_blank_line_is_noop():
    assert PaybackShell(_model(), session=object()).execute_line("   ") == 0


def test_filter_persists_until_edit(capsys):
    model = _model()
    shell = PaybackShell(model, session=object())

    assert shell.execute_line("find bernice") == 0
    assert [p.id for p in model.filtered_persons()] == [240002]

    # Alex is hidden by the filter
    assert shell.execute_line("edit 240001 --name Alexander") == 1
    assert "Error: The person ID provided is invalid" in capsys.readouterr().out

    assert shell.execute_line("edit 240002 --tag -1") == 0
    assert model.find_by_id(240002).tags == ()
    assert len(model.filtered_persons()) == 2


def test_unparseable_lines_return_error_codes(capsys):
    shell = PaybackShell(_model(), session=object())
    assert shell.execute_line('edit 240001 --name "unterminated') == 1
    assert shell.execute_line("frobnicate") == 2
    assert shell.execute_line("edit notanumber --name X") == 2
    capsys.readouterr()


def test_help_prints_usage(capsys):
    assert PaybackShell(_model(), session=object()).execute_line("help") == 0
    assert "edit" in capsys.readouterr().out
