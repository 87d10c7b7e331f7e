from types import SimpleNamespace

from logbook.suggestions import Suggestion, suggest

def last(load=None, reps=None, rir=None):
    return SimpleNamespace(load=load, reps=reps, rir=rir)

PULL_UPS = "Pull-Ups (Failure)"

def test_no_previous_set_means_no_suggestion():
    assert suggest("Bench Press", "Top Set", None) is None

def test_failure_sets_add_five_after_ten_reps():
    s = suggest(PULL_UPS, "Set 1 (Fail)", last("BW+20", 12))
    assert s == Suggestion(load="BW+25", reps=None, rir=0)

def test_failure_sets_repeat_load_below_ten_reps():
    s = suggest(PULL_UPS, "Set 1 (Fail)", last("BW+20", 6))
    assert s == Suggestion(load="BW+20", reps=None, rir=0)

def test_failure_sets_without_reps_repeat_load():
    assert suggest(PULL_UPS, "Set 2 (Fail)", last("BW+10")).load == "BW+10"

def test_failure_sets_default_addend_to_zero():
    assert suggest(PULL_UPS, "Set 1 (Fail)", last(None, 10)).load == "BW+5"
    assert suggest(PULL_UPS, "Set 1 (Fail)", last("BW", 11)).load == "BW+5"
    assert suggest(PULL_UPS, "Set 1 (Fail)", last("BW+7.5", 10)).load == "BW+12.5"

def test_weighted_bump_when_earned():
    s = suggest("Bench Press", "Top Set", last("225", 9, 0.5))
    assert s == Suggestion(load="230", reps=None, rir=None)

def test_weighted_no_bump_with_reps_in_reserve():
    assert suggest("Bench Press", "Top Set", last("225", 9, 3)).load == "225"

def test_weighted_no_bump_below_eight_reps_or_unknown_rir():
    assert suggest("Bench Press", "Top Set", last("225", 7, 0)).load == "225"
    assert suggest("Bench Press", "Top Set", last("225", 10, None)).load == "225"

def test_isolation_exercises_bump_two_and_a_half():
    assert suggest("Lateral Raises (Myo-reps)", "Activation", last("20s", 12, 1)).load == "22.5s"
    assert suggest("Rear Delt Fly / Face Pull", "Set 1", last("30", 15, 0)).load == "32.5"
    assert suggest("Pec Deck / Push-Ups (Drop)", "Set 1", last("100", 12, 1)).load == "102.5"

def test_unit_suffix_is_preserved():
    assert suggest("Leg Press", "Top Set", last("100 kg", 8, 1)).load == "105 kg"

def test_unparseable_load_is_echoed():
    assert suggest("Abs", "Set 1", last("red band", 20, 0)) == Suggestion(load="red band")
    assert suggest("Abs", "Set 1", last(None, 20, 0)) == Suggestion(load="")

def test_suggestion_is_a_pure_function_of_last():
    prev = last("225", 9, 0.5)
    assert suggest("Bench Press", "Top Set", prev) == suggest("Bench Press", "Top Set", prev)
    assert prev.load == "225"
