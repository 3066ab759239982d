from pawpal.llm.classifier import MODE_KEYWORDS, detect_mode
from pawpal.schemas import MODES


def test_detect_mode_poison_wins_over_other_keywords():
    assert detect_mode("My dog ate rat POISON with his food after a bath") == "EMERGENCY"
    assert detect_mode("is this treat poisonous?") == "EMERGENCY"


def test_detect_mode_precedence_order():
    assert detect_mode("Should I brush him before his food?") == "DIET"
    assert detect_mode("He gets scared when I trim his nails") == "GROOMING"
    assert detect_mode("She started biting strangers") == "BEHAVIOR"
    assert detect_mode("My cat was hit by car") == "EMERGENCY"


def test_detect_mode_is_case_insensitive():
    assert detect_mode("SEIZURE right now") == "EMERGENCY"
    assert detect_mode("New Diet plan?") == "DIET"


def test_detect_mode_matches_substrings():
    # "eat" inside "great" counts as a diet keyword.
    assert detect_mode("He looks great") == "DIET"
    assert detect_mode("hairball again") == "GROOMING"


def test_detect_mode_defaults_to_health():
    assert detect_mode("He seems to be limping a bit. Should I be worried?") == "HEALTH"
    assert detect_mode("") == "HEALTH"
    assert detect_mode(None) == "HEALTH"


def test_mode_keywords_cover_every_mode_but_default():
    assert [mode for mode, _ in MODE_KEYWORDS] == list(MODES[:-1])
