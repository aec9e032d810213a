import itertools

import pytest

from eulerworks.problem059 import crack, decrypt, is_text_char, keys, main, parse_cipher

PLAIN = "An extract taken from the introduction of one of Euler's most celebrated papers (1737)."


@pytest.mark.parametrize(
    "char, expected",
    [("A", True), ("k", True), ("7", True), (" ", True), ("(", True), ("'", True),
     ("~", False), ("\n", False), ("@", False)],
)
def test_is_text_char(char, expected):
    assert is_text_char(ord(char)) is expected


def test_is_text_char_rejects_high_codes():
    assert is_text_char(200) is False


def test_parse_cipher():
    assert parse_cipher("36,22,80\n") == [36, 22, 80]


def test_parse_cipher_rejects_garbage():
    with pytest.raises(ValueError):
        parse_cipher("1,x")


def test_parse_cipher_rejects_empty():
    with pytest.raises(ValueError):
        parse_cipher("  \n")


def test_decrypt_example_from_statement():
    assert decrypt([65], "*") == b"k"
    assert decrypt([107], "*") == b"A"


def test_decrypt_round_trip():
    cipher = decrypt(PLAIN.encode(), "god")
    assert decrypt(cipher, "god") == PLAIN.encode()


def test_decrypt_rejects_empty_key():
    with pytest.raises(ValueError):
        decrypt([1, 2], "")


def test_keys_order_and_size():
    all_keys = list(keys())
    assert all_keys[:2] == ["aaa", "baa"]
    assert all_keys[-1] == "zzz"
    assert len(all_keys) == 26**3
    assert len(set(all_keys)) == len(all_keys)


def test_crack_first_key():
    cipher = decrypt(PLAIN.encode(), "aaa")
    assert crack(cipher) == ("aaa", PLAIN.encode())


def test_crack_result_is_consistent():
    cipher = list(decrypt(PLAIN.encode(), "god"))
    key, plain = crack(cipher)
    order = list(keys())
    assert decrypt(cipher, key) == plain
    assert all(is_text_char(code) for code in plain)
    assert order.index(key) <= order.index("god")


def test_crack_without_solution():
    with pytest.raises(ValueError):
        crack([200, 200, 200])


def test_main_prints_sum(tmp_path, capsys):
    cipher = decrypt(PLAIN.encode(), "aaa")
    path = tmp_path / "cipher.txt"
    path.write_text(",".join(str(code) for code in cipher), encoding="ascii")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "XOR key: aaa" in out
    assert f"answer = {sum(PLAIN.encode())} " in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1


def test_keys_is_lazy():
    assert list(itertools.islice(keys(), 1)) == ["aaa"]