import pytest
from src.vm_lex.utils import parse_decimal, is_unsigned_nbit, I64_MAX, I64_MIN

@pytest.mark.parametrize("tok, expected", [
    ("0", 0), ("17", 17), ("+5", 5), ("-3", -3), ("007", 7),
    (str(I64_MAX), I64_MAX), (str(I64_MIN), I64_MIN),
])
def test_parse_decimal_ok(tok, expected):
    assert parse_decimal(tok) == expected

@pytest.mark.parametrize("tok", [
    "", "abc", "12abc", "0x10", "1.5", "--1", str(I64_MAX + 1), str(I64_MIN - 1),
])
def test_parse_decimal_rejects(tok):
    with pytest.raises(ValueError):
        parse_decimal(tok)

def test_nbit_checks():
    assert is_unsigned_nbit(7, 3)
    assert not is_unsigned_nbit(8, 3)
    assert is_unsigned_nbit(32767, 15)
    assert not is_unsigned_nbit(-1, 15)
    with pytest.raises(ValueError):
        is_unsigned_nbit(1, 0)
