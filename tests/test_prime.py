import io

import pytest

from primeweb.prime import (
    check_number,
    intro,
    is_prime,
    main,
    prompt,
    read_user_input,
)


def test_is_prime_basic():
    result, msg = is_prime(0)
    assert result is False
    assert msg == "0 is not prime by definition"

    result, msg = is_prime(7)
    assert result is True
    assert msg == "7 is a prime number"


@pytest.mark.parametrize(
    "number, expected, message",
    [
        (7, True, "7 is a prime number"),
        (8, False, "8 is not prime because it is divisible by 2"),
        (0, False, "0 is not prime by definition"),
        (1, False, "1 is not prime by definition"),
        (-11, False, "Negative numbers are not prime"),
    ],
)
def test_is_prime_table(number, expected, message):
    assert is_prime(number) == (expected, message)


@pytest.mark.parametrize(
    "number, message",
    [
        (2, "2 is a prime number"),
        (3, "3 is a prime number"),
        (4, "4 is not prime because it is divisible by 2"),
        (9, "9 is not prime because it is divisible by 3"),
        (49, "49 is not prime because it is divisible by 7"),
    ],
)
def test_is_prime_small_values(number, message):
    assert is_prime(number)[1] == message


def test_prompt():
    out = io.StringIO()
    prompt(out)
    assert out.getvalue() == "-> "


def test_intro():
    out = io.StringIO()
    intro(out)
    text = out.getvalue()
    assert "Enter a whole number" in text
    assert text.startswith("Is it prime?\n")
    assert text.endswith("-> ")


@pytest.mark.parametrize("line", ["q", "Q"])
def test_check_number_quit(line):
    assert check_number(line) == ("", True)


@pytest.mark.parametrize("line", ["", "abc", "7.5", " 7", "1_000", "99999999999999999999"])
def test_check_number_rejects_non_whole(line):
    assert check_number(line) == ("Please enter a whole number", False)


def test_check_number_prime():
    assert check_number("7") == ("7 is a prime number", False)
    assert check_number("+7") == ("7 is a prime number", False)
    assert check_number("-3") == ("Negative numbers are not prime", False)


def test_read_user_input_stops_on_quit():
    out = io.StringIO()
    read_user_input(["7\n", "x\r\n", "q\n", "8\n"], out)
    assert out.getvalue() == (
        "7 is a prime number\n-> Please enter a whole number\n-> "
    )


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nq\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "4 is not prime because it is divisible by 2\n" in captured
    assert captured.endswith("Goodbye.\n")