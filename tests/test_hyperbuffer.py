from fhashkit.hyperbuffer import HyperTextBuffer, TokenOffset


def test_empty_buffer():
    buf = HyperTextBuffer()
    assert buf.text() == ""
    assert buf.link_offsets() == []
    assert buf.links() == []


def test_append_text_and_link():
    buf = HyperTextBuffer()
    buf.append_text("MD5: ")
    buf.append_link("abc123")
    buf.append_text("\r\n")
    assert buf.text() == "MD5: abc123\r\n"
    assert buf.link_offsets() == [TokenOffset(len("MD5: "), len("abc123"))]
    assert buf.links() == ["abc123"]


def test_multiple_links_in_order():
    buf = HyperTextBuffer()
    for name, value in [("MD5", "aa"), ("SHA1", "bbb")]:
        buf.append_text(name + ": ")
        buf.append_link(value)
        buf.append_text("\r\n")
    assert buf.links() == ["aa", "bbb"]
    text = buf.text()
    for off in buf.link_offsets():
        assert text[off.start : off.start + off.length] in ("aa", "bbb")


def test_clear_drops_text_and_links():
    buf = HyperTextBuffer()
    buf.append_link("x")
    buf.clear()
    assert buf.text() == ""
    assert buf.link_offsets() == []
    buf.append_link("y")
    assert buf.link_offsets() == [TokenOffset(0, 1)]


def test_link_offsets_returns_copy():
    buf = HyperTextBuffer()
    buf.append_link("abc")
    copy = buf.link_offsets()
    copy.clear()
    assert buf.link_offsets() == [TokenOffset(0, 3)]


def test_set_link_offsets_restores_saved_state():
    buf = HyperTextBuffer()
    buf.append_text("head ")
    buf.append_link("hash")
    saved_text = buf.text()
    saved = buf.link_offsets()
    buf.append_text("waiting")
    buf.append_link("other")
    buf.clear()
    buf.append_text(saved_text)
    buf.set_link_offsets(saved)
    assert buf.text() == saved_text
    assert buf.links() == ["hash"]


def test_empty_link_recorded():
    buf = HyperTextBuffer()
    buf.append_text("ab")
    buf.append_link("")
    assert buf.link_offsets() == [TokenOffset(2, 0)]
    assert buf.links() == [""]


def test_token_offset_end():
    off = TokenOffset(4, 6)
    assert off.end == off.start + off.length