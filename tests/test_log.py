from banksystem.log import log


def test_log_plain(capsys):
    log("Test")
    assert capsys.readouterr().out == "Test\n"


def test_log_formatted(capsys):
    a = 5
    b = 5.5
    c = 5.123456
    d = "Test"
    log("{} {} {:.2f} {}", a, b, c, d)
    assert capsys.readouterr().out == "5 5.5 5.12 Test\n"