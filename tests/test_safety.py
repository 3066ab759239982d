from pawpal.llm.safety import BANNED_WORDS, SAFETY_ALERT, contains_banned_term, safety_filter


def test_safety_filter_blocks_dosage():
    assert safety_filter("Give him 5mg twice a day") == SAFETY_ALERT
    assert safety_filter("Give 200mg of paracetamol") == SAFETY_ALERT
    assert safety_filter("Half a TABLET of Aspirin") == SAFETY_ALERT


def test_safety_filter_passes_safe_text_unchanged():
    text = "He needs rest"
    assert safety_filter(text) is text
    assert safety_filter("") == ""


def test_safety_filter_matches_raw_substrings():
    # Known false positives of substring matching.
    assert safety_filter("OMG, what a good boy!") == SAFETY_ALERT
    assert safety_filter("He was overdosed with love") == SAFETY_ALERT


def test_safety_filter_is_idempotent():
    samples = ["Give 200mg of paracetamol", "He needs rest", "", "Tylenol is not for cats"]
    for text in samples:
        assert safety_filter(safety_filter(text)) == safety_filter(text)


def test_safety_alert_is_clean():
    assert not contains_banned_term(SAFETY_ALERT)
    assert all(word == word.lower() for word in BANNED_WORDS)
