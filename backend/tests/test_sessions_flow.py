from fastapi.testclient import TestClient
from logbook.main import app

client = TestClient(app)

def bench_day(date="2026-05-04", load="225", reps=5, rir=1.5, notes=None, bodyweight=181.0):
    return {
        "date": date,
        "workout_type": "FB-A",
        "bodyweight": bodyweight,
        "sets": [
            {"exercise": "Bench Press", "set_type": "Top Set", "load": load, "reps": reps, "rir": rir, "notes": notes},
            {"exercise": "Bench Press", "set_type": "Back-off", "load": "", "reps": None, "rir": None, "notes": ""},
            {"exercise": "Pull-Ups (Failure)", "set_type": "Set 1 (Fail)", "load": "BW+20", "reps": 12, "rir": 0},
        ],
    }

def test_save_session_drops_blank_rows_and_copies_session_fields():
    r = client.post("/sessions", json=bench_day())
    assert r.status_code == 201
    body = r.json()
    assert body["date"] == "2026-05-04" and body["workout_type"] == "FB-A"
    assert [s["set_type"] for s in body["sets"]] == ["Top Set", "Set 1 (Fail)"]
    assert all(s["session_id"] == body["id"] and s["bodyweight"] == 181.0 for s in body["sets"])

    r = client.get(f"/sessions/{body['id']}")
    assert r.status_code == 200
    assert len(r.json()["sets"]) == 2

def test_recent_sessions_and_lookups():
    client.post("/sessions", json=bench_day("2026-05-01", load="215"))
    client.post("/sessions", json=bench_day("2026-05-04", load="225"))

    r = client.get("/sessions", params={"limit": 1})
    assert [s["date"] for s in r.json()] == ["2026-05-04"]

    r = client.get("/sets/last", params={"exercise": "Bench Press", "set_type": "Top Set"})
    assert r.json()["load"] == "225"

    r = client.get("/sets/last", params={"exercise": "Leg Press", "set_type": "Top Set"})
    assert r.status_code == 200 and r.json() is None

    r = client.get("/sets/history", params={"exercise": "Bench Press"})
    assert [s["load"] for s in r.json()] == ["225", "215"]

def test_pr_and_suggestion_endpoints():
    client.post("/sessions", json=bench_day(load="225", reps=9, rir=0.5))

    r = client.get("/stats/pr", params={"exercise": "Bench Press", "set_type": "Top Set"})
    pr = r.json()
    assert pr["score"] == 225 * (1 + 9 / 30)
    assert pr["display"] == 293
    assert pr["record"]["load"] == "225"

    r = client.get("/stats/pr", params={"exercise": "Pull-Ups (Failure)", "set_type": "Set 1 (Fail)"})
    assert r.json()["display"] == 12

    r = client.get("/stats/suggestion", params={"exercise": "Bench Press", "set_type": "Top Set"})
    assert r.json() == {"load": "230", "reps": None, "rir": None}

    r = client.get("/stats/suggestion", params={"exercise": "Pull-Ups (Failure)", "set_type": "Set 1 (Fail)"})
    assert r.json() == {"load": "BW+25", "reps": None, "rir": 0}

    r = client.get("/stats/suggestion", params={"exercise": "Leg Press", "set_type": "Top Set"})
    assert r.json() is None

def test_workout_sheet_and_catalog():
    client.post("/sessions", json=bench_day())
    r = client.get("/program/FB-A")
    assert r.status_code == 200
    sheet = r.json()
    assert sheet["exercises"][0]["exercise"] == "Back Squat / Hack Squat"
    bench = next(e for e in sheet["exercises"] if e["exercise"] == "Bench Press")
    top, backoff = bench["slots"]
    assert top["last"]["load"] == "225" and top["suggestion"]["load"] == "225"
    assert backoff["last"] is None and backoff["suggestion"] is None
    assert bench["best"]["display"] == 263

    assert set(client.get("/program").json()) == {"FB-A", "FB-B", "FB-C"}
    exercises = client.get("/program/exercises").json()
    assert exercises == sorted(exercises)

def test_snapshot_and_bodyweight():
    client.post("/sessions", json=bench_day())
    rows = client.get("/stats/snapshot").json()
    assert len(rows) == 6
    assert next(r for r in rows if r["exercise"] == "Bench Press")["best"]["display"] == 263

    r = client.get("/stats/bodyweight", params={"days": 30})
    assert r.status_code == 200
    assert r.json()["days"] == 30

def test_history_csv_export():
    client.post("/sessions", json=bench_day(notes='felt "easy"'))
    r = client.get("/sets/history.csv", params={"exercise": "Bench Press"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert 'filename="history_Bench_Press.csv"' in r.headers["content-disposition"]
    assert r.text == (
        "date,type,exercise,setType,load,reps,rir,notes\n"
        '"2026-05-04","FB-A","Bench Press","Top Set","225","5","1.5","felt ""easy"""'
    )

def test_backup_round_trip_and_wipe():
    client.post("/sessions", json=bench_day("2026-05-01"))
    client.post("/sessions", json=bench_day("2026-05-04"))
    doc = client.get("/backup").json()
    assert len(doc["sessions"]) == 2 and len(doc["sets"]) == 4

    assert client.delete("/sessions").status_code == 204
    assert client.get("/sessions").json() == []

    r = client.post("/backup/import", params={"mode": "replace"}, json=doc)
    assert r.status_code == 200
    assert r.json() == {"mode": "replace", "sessions": 2, "sets": 4}
    assert len(client.get("/sessions").json()) == 2

def test_plate_calculator():
    r = client.get("/tools/plates", params={"target": 225, "bar": 45})
    assert r.json() == {"target": 225, "bar": 45, "per_side": 90, "plates": [45, 45]}
    r = client.get("/tools/plates", params={"target": 140})
    assert r.json()["plates"] == [45, 2.5]
