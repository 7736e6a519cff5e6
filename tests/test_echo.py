from teachos.echo import echo, main


def test_echo_joins_with_spaces():
    assert echo(["hello", "there"]) == "hello there\n"


def test_echo_single_argument():
    assert echo(["x"]) == "x\n"


def test_echo_no_arguments_prints_nothing():
    assert echo([]) == ""


def test_echo_round_trip_split():
    args = ["a", "bb", "ccc"]
    assert echo(args).rstrip("\n").split(" ") == args


def test_main_writes_stdout(capsys):
    assert main(["OK"]) == 0
    assert capsys.readouterr().out == "OK\n"