import io
import pytest
from src.vm_lex.lexer import strip_comment, split_words, read_lines

# --- strip_comment ---
@pytest.mark.parametrize("src, expected", [
    ("push constant 7 // cmt", "push constant 7"),
    ("// full comment", ""),
    ("   add   ", "add"),
    ("label a/b", "label a/b"),
    ("goto L//pegado", "goto L"),
    ("", ""),
])
def test_strip_comment(src, expected):
    assert strip_comment(src) == expected

# --- split_words ---
@pytest.mark.parametrize("src, expected", [
    ("push constant 7", [("push", 1), ("constant", 6), ("7", 15)]),
    ("\tpop\ttemp  3", [("pop", 2), ("temp", 6), ("3", 12)]),
    ("  neg // x y", [("neg", 3)]),
    ("   ", []),
])
def test_split_words(src, expected):
    assert [(w.text, w.col) for w in split_words(src)] == expected

# --- read_lines ---
def test_read_lines_skips_blank_and_comment_lines():
    src = "\n// encabezado\n   \n  push constant 1  \n\t// otro\nadd // suma\n"
    lines = list(read_lines(io.StringIO(src)))
    assert [(l.lineno, l.text) for l in lines] == [(4, "push constant 1"), (6, "add")]
    assert all(l.words for l in lines)

def test_read_lines_crlf_and_missing_final_newline():
    lines = list(read_lines(io.StringIO("pop local 0\r\nreturn")))
    assert [l.text for l in lines] == ["pop local 0", "return"]
    assert [w.text for w in lines[0].words] == ["pop", "local", "0"]

def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []

def test_read_lines_drops_leading_bom():
    lines = list(read_lines(io.StringIO("\ufeffpush constant 1\n\ufeffadd\n")))
    assert [w.text for w in lines[0].words] == ["push", "constant", "1"]
    # solo se descarta al inicio del flujo
    assert lines[1].words[0].text == "\ufeffadd"
