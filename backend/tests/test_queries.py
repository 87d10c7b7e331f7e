from logbook.program import all_exercises
from logbook.repositories.session_repo import SessionRepository
from logbook.repositories.set_repo import SetRepository

def bench(load, reps=5, set_type="Top Set"):
    return {"exercise": "Bench Press", "set_type": set_type, "load": load, "reps": reps}

def test_most_recent_prefers_latest_date_over_insert_order(save_session, db):
    save_session(date="2026-03-10", sets=[bench("230")])
    save_session(date="2026-03-03", sets=[bench("225")])
    last = SetRepository(db).most_recent_for("Bench Press", "Top Set")
    assert last.load == "230"

def test_most_recent_same_day_goes_to_higher_id(save_session, db):
    save_session(date="2026-03-10", sets=[bench("230")])
    save_session(date="2026-03-10", sets=[bench("235")])
    last = SetRepository(db).most_recent_for("Bench Press", "Top Set")
    assert last.load == "235"

def test_most_recent_matches_exact_slot(save_session, db):
    save_session(sets=[bench("185", set_type="Back-off")])
    repo = SetRepository(db)
    assert repo.most_recent_for("Bench Press", "Top Set") is None
    assert repo.most_recent_for("Bench Press", "Back-off").load == "185"

def test_history_newest_first_and_bounded(save_session, db):
    save_session(date="2026-03-01", sets=[bench("215"), bench("185", set_type="Back-off")])
    save_session(date="2026-03-08", sets=[bench("220")])
    save_session(date="2026-03-04", sets=[bench("225"), {"exercise": "Abs", "set_type": "Set 1", "reps": 20}])
    repo = SetRepository(db)
    rows = repo.history("Bench Press")
    assert [r.load for r in rows] == ["220", "225", "185", "215"]
    assert [r.load for r in repo.history("Bench Press", limit=2)] == ["220", "225"]
    assert repo.history("Leg Press") == []

def test_recent_sessions_newest_first(save_session, db):
    a = save_session(date="2026-03-01", sets=[bench("215")])
    b = save_session(date="2026-03-08", sets=[bench("220")])
    c = save_session(date="2026-03-08", sets=[bench("225")])
    repo = SessionRepository(db)
    assert [s.id for s in repo.recent()] == [c.id, b.id, a.id]
    assert [s.id for s in repo.recent(limit=1)] == [c.id]

def test_all_exercises_comes_from_program():
    names = all_exercises()
    assert names == sorted(names)
    assert names.count("Pull-Ups (Failure)") == 1
    assert "Back Squat / Hack Squat" in names and "Abs" in names
