from cli import main


def test_cli_generate(capsys):
    assert main(["generate", "--radius", "3", "--seed", "1", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert "radius=3" in out
    assert "connected=True" in out
    assert "#" in out


def test_cli_wrap(capsys):
    assert main(["wrap", "--radius", "2", "2", "3"]) == 0
    assert "-> (0,0)" in capsys.readouterr().out


def test_cli_pick(capsys):
    assert main(["pick", "--size", "10", "15", "8.66"]) == 0
    assert "axial (1,0)" in capsys.readouterr().out


def test_cli_rejects_bad_config(capsys):
    assert main(["generate", "--radius", "-1"]) == 2
    assert "radius" in capsys.readouterr().err
    assert main(["pick", "--size", "0", "1", "1"]) == 2
