from bugscope import helpers as h


def test_redact_replaces_every_occurrence():
    msg = "key sk-abc rejected; sk-abc is revoked"
    assert h.redact(msg, "sk-abc") == "key *** rejected; *** is revoked"


def test_redact_without_secret_is_identity():
    assert h.redact("plain message", "") == "plain message"
    assert h.redact("plain message", None) == "plain message"
    assert h.redact("plain message", "   ") == "plain message"


def test_redact_stringifies_non_text():
    assert h.redact(ValueError("bad sk-1"), "sk-1") == "bad ***"
    assert h.redact(None, "sk-1") == ""


def test_is_blank():
    assert h.is_blank(None)
    assert h.is_blank("")
    assert h.is_blank("  \n\t")
    assert not h.is_blank("x = 1")
    assert not h.is_blank("None")
