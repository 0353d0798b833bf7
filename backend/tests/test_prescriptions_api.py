import pytest
from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

def new_workout(H, title="Program"):
    r = client.post("/workouts", headers=H, json={"title": title})
    assert r.status_code == 201
    return r.json()["id"]

def straight(exercise_id, order, **extra):
    body = {"type": "straight", "group_order": order,
            "exercises": [{"exercise_id": exercise_id, "exercise_order": 1, "sets": 3, "reps": 5}]}
    body.update(extra)
    return body

def test_create_group_sorts_entries_and_converts_weight(make_user, exercises, rpe_id):
    _, H = make_user()
    wid = new_workout(H)
    r = client.post(f"/workouts/{wid}/groups", headers=H, json={
        "type": "superset", "group_order": 1, "group_rounds": 3, "rest_between_sets": 90,
        "exercises": [
            {"exercise_id": exercises["plank"], "exercise_order": 2, "hold_seconds": 60},
            {"exercise_id": exercises["squat"], "exercise_order": 1, "sets": 4, "reps": 6,
             "target_weight": {"value": 225, "unit": "lbs"}, "rpe_value_id": rpe_id},
        ],
    })
    assert r.status_code == 201
    g = r.json()
    assert g["workout_id"] == wid
    assert g["group_rounds"] == 3
    first, second = g["exercises"]
    assert first["exercise_order"] == 1
    assert first["exercise"]["name"] == "Squat"
    assert first["target_weight_kg"] == pytest.approx(102.058, abs=1e-3)
    assert first["rpe_value"]["value"] == 8
    assert second["exercise_order"] == 2
    assert second["hold_seconds"] == 60 and second["reps"] is None

@pytest.mark.parametrize("entry, message", [
    ({"reps": 5, "hold_seconds": 30}, "both reps and hold_seconds"),
    ({"sets": 3}, "either reps or hold_seconds"),
])
def test_reps_xor_hold_enforced(make_user, exercises, entry, message):
    _, H = make_user()
    wid = new_workout(H)
    r = client.post(f"/workouts/{wid}/groups", headers=H, json={
        "type": "straight", "group_order": 1,
        "exercises": [{"exercise_id": exercises["squat"], "exercise_order": 1, **entry}],
    })
    assert r.status_code == 422
    assert message in str(r.json()["detail"])
    assert client.get(f"/workouts/{wid}/groups", headers=H).json() == []

def test_unknown_references_rejected(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    r = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(999999, 1))
    assert r.status_code == 422
    assert r.json()["detail"] == "Exercise not found: [999999]"

    body = straight(exercises["squat"], 1)
    body["exercises"][0]["rpe_value_id"] = 999999
    r = client.post(f"/workouts/{wid}/groups", headers=H, json=body)
    assert r.status_code == 422
    assert "RPE value not found" in r.json()["detail"]

def test_group_order_must_be_unique_per_workout(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    assert client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["squat"], 1)).status_code == 201
    r = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["bench"], 1))
    assert r.status_code == 422
    assert "already used" in r.json()["detail"]

    # same order in another workout is fine
    other = new_workout(H, "Other")
    assert client.post(f"/workouts/{other}/groups", headers=H, json=straight(exercises["bench"], 1)).status_code == 201

def test_update_group_fields_and_replace_entries(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    g = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["squat"], 1)).json()

    r = client.patch(f"/workouts/{wid}/groups/{g['id']}", headers=H, json={"group_notes": "brace hard"})
    assert r.status_code == 200
    assert r.json()["group_notes"] == "brace hard"
    assert [e["exercise_id"] for e in r.json()["exercises"]] == [exercises["squat"]]

    r = client.patch(f"/workouts/{wid}/groups/{g['id']}", headers=H, json={
        "type": "circuit",
        "exercises": [
            {"exercise_id": exercises["lunge"], "exercise_order": 1, "reps": 12},
            {"exercise_id": exercises["plank"], "exercise_order": 2, "hold_seconds": 30},
        ],
    })
    assert r.status_code == 200
    body = r.json()
    assert body["type"] == "circuit"
    assert [e["exercise_id"] for e in body["exercises"]] == [exercises["lunge"], exercises["plank"]]

    r = client.patch(f"/workouts/{wid}/groups/{g['id']}", headers=H, json={"type": None})
    assert r.status_code == 422

def test_update_group_order_collision(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["squat"], 1))
    g2 = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["bench"], 2)).json()
    r = client.patch(f"/workouts/{wid}/groups/{g2['id']}", headers=H, json={"group_order": 1})
    assert r.status_code == 422
    # moving onto its own order is a no-op, not a collision
    r = client.patch(f"/workouts/{wid}/groups/{g2['id']}", headers=H, json={"group_order": 2})
    assert r.status_code == 200

def test_delete_group(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    g = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["squat"], 1)).json()
    assert client.delete(f"/workouts/{wid}/groups/{g['id']}", headers=H).status_code == 204
    assert client.get(f"/workouts/{wid}/groups/{g['id']}", headers=H).status_code == 404

def test_append_exercise_goes_last(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    g = client.post(f"/workouts/{wid}/groups", headers=H, json={
        "type": "circuit", "group_order": 1,
        "exercises": [
            {"exercise_id": exercises["squat"], "exercise_order": 1, "reps": 10},
            {"exercise_id": exercises["lunge"], "exercise_order": 4, "reps": 10},
        ],
    }).json()
    r = client.post(f"/workouts/{wid}/groups/{g['id']}/exercises", headers=H,
                    json={"exercise_id": exercises["plank"], "hold_seconds": 40})
    assert r.status_code == 201
    assert r.json()["exercise_order"] == 5
    assert r.json()["group_id"] == g["id"]

    r = client.post(f"/workouts/{wid}/groups/{g['id']}/exercises", headers=H,
                    json={"exercise_id": exercises["plank"], "hold_seconds": 40, "reps": 3})
    assert r.status_code == 422

def test_reorder_swaps_groups(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    a = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["squat"], 1)).json()
    b = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["bench"], 2)).json()
    r = client.put(f"/workouts/{wid}/groups/order", headers=H, json={"group_orders": [
        {"group_id": a["id"], "group_order": 2},
        {"group_id": b["id"], "group_order": 1},
    ]})
    assert r.status_code == 200
    assert [(g["id"], g["group_order"]) for g in r.json()] == [(b["id"], 1), (a["id"], 2)]

def test_reorder_is_all_or_nothing(make_user, exercises):
    _, H = make_user()
    wid = new_workout(H)
    a = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["squat"], 1)).json()
    b = client.post(f"/workouts/{wid}/groups", headers=H, json=straight(exercises["bench"], 2)).json()

    r = client.put(f"/workouts/{wid}/groups/order", headers=H, json={"group_orders": [
        {"group_id": a["id"], "group_order": 2},
        {"group_id": b["id"], "group_order": 1},
        {"group_id": 99999, "group_order": 3},
    ]})
    assert r.status_code == 422
    assert "99999" in r.json()["detail"]

    r = client.put(f"/workouts/{wid}/groups/order", headers=H, json={"group_orders": [
        {"group_id": a["id"], "group_order": 3},
    ]})
    assert r.status_code == 422

    orders = [(g["id"], g["group_order"]) for g in client.get(f"/workouts/{wid}/groups", headers=H).json()]
    assert orders == [(a["id"], 1), (b["id"], 2)]

def test_groups_hidden_from_other_users(make_user, exercises):
    _, owner = make_user()
    _, other = make_user()
    wid = new_workout(owner)
    g = client.post(f"/workouts/{wid}/groups", headers=owner, json=straight(exercises["squat"], 1)).json()
    assert client.get(f"/workouts/{wid}/groups", headers=other).status_code == 404
    assert client.get(f"/workouts/{wid}/groups/{g['id']}", headers=other).status_code == 404
    assert client.post(f"/workouts/{wid}/groups", headers=other,
                       json=straight(exercises["bench"], 2)).status_code == 404
    assert client.delete(f"/workouts/{wid}/groups/{g['id']}", headers=other).status_code == 404

def test_group_from_another_workout_not_found(make_user, exercises):
    _, H = make_user()
    w1 = new_workout(H)
    w2 = new_workout(H)
    g = client.post(f"/workouts/{w1}/groups", headers=H, json=straight(exercises["squat"], 1)).json()
    assert client.get(f"/workouts/{w2}/groups/{g['id']}", headers=H).status_code == 404
