import demo


def test_demo_sample_round_trips(capsys):
    assert demo.main([]) == 0
    out = capsys.readouterr().out
    assert f"Decoded string from binary string: {demo.SAMPLE_TEXT}" in out
    for encoding in ("UTF-8", "UTF-16", "US-ASCII", "GB2312"):
        assert f"Binary string of {encoding} " in out


def test_demo_custom_text_and_encodings(capsys):
    assert demo.main(["abracadabra", "--encodings", "utf-8"]) == 0
    out = capsys.readouterr().out
    assert "Huffman: 23 bits for 11 symbols (5 distinct)" in out
    assert "Packed: 3 bytes (1 pad bits)" in out
    assert "Binary string of UTF-8 (88 bits)" in out
    assert "UTF-16" not in out


def test_demo_empty_text(capsys):
    assert demo.main(["", "--encodings", "utf-8"]) == 0
    assert "Huffman: 0 bits for 0 symbols (0 distinct)" in capsys.readouterr().out
