from sitecrawler.colors import formatted_error_text


def test_formatted_error_text_is_red_error():
    assert formatted_error_text() == "\x1b[31mError\x1b[0m"


def test_formatted_error_text_resets_colour_at_end():
    text = formatted_error_text()
    assert text.endswith("\x1b[0m")
    assert "Error" in text