from wizards_bot.utils.text_format import is_blank, split_message


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \n\t ")
    assert not is_blank(" https://twitter.com/wezm ")


def test_split_message_short_text():
    assert split_message("hello", 10) == ["hello"]


def test_split_message_prefers_line_breaks():
    text = "first line\nsecond line"
    assert split_message(text, 15) == ["first line", "second line"]


def test_split_message_falls_back_to_spaces():
    assert split_message("aaaa bbbb cccc", 9) == ["aaaa bbbb", "cccc"]


def test_split_message_hard_cut():
    parts = split_message("x" * 25, 10)
    assert parts == ["x" * 10, "x" * 10, "x" * 5]
    assert all(len(part) <= 10 for part in parts)
