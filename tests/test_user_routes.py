import pytest

NOT_FOUND = {"message": "user not found"}


def test_root_returns_greeting(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "halo world"
    assert resp.headers["content-type"].startswith("text/plain")


def test_list_users_returns_seed_in_order(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["id"] for u in resp.json()] == [1, 2, 3]
    assert resp.json()[0] == {"id": 1, "name": "user1", "email": "example@gmail.com"}


def test_get_user_by_id(client):
    resp = client.get("/users/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "name": "user2", "email": "example2@gmail.com"}


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize("user_id", ["99", "0", "abc", "-1"])
def test_missing_user_is_404(client, method, user_id):
    kwargs = {"json": {"name": "x", "email": "y"}} if method == "put" else {}
    resp = getattr(client, method)(f"/users/{user_id}", **kwargs)
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND


def test_create_then_get(client):
    body = {"id": 4, "name": "user4", "email": "a@b.com"}
    resp = client.post("/users", json=body)
    assert resp.status_code == 200
    assert resp.json() == body

    resp = client.get("/users/4")
    assert resp.status_code == 200
    assert resp.json() == body


def test_create_accepts_duplicate_id_and_get_returns_first(client):
    resp = client.post("/users", json={"id": 1, "name": "dup", "email": "dup@b.com"})
    assert resp.status_code == 200

    users = client.get("/users").json()
    assert [u["id"] for u in users].count(1) == 2

    assert client.get("/users/1").json()["name"] == "user1"


def test_create_stores_arbitrary_shape(client):
    body = {"nickname": "nobody"}
    resp = client.post("/users", json=body)
    assert resp.status_code == 200
    assert resp.json() == body
    assert client.get("/users").json()[-1] == body


def test_create_rejects_non_object_body(client):
    resp = client.post("/users", content="not json", headers={"content-type": "application/json"})
    assert resp.status_code == 422


def test_create_rejects_json_array(client):
    resp = client.post("/users", json=[{"id": 4}])
    assert resp.status_code == 422


def test_create_from_form_body(client):
    resp = client.post("/users", data={"id": "4", "name": "u", "email": "e"})
    assert resp.status_code == 200
    assert resp.json() == {"id": "4", "name": "u", "email": "e"}
    assert client.get("/users").json()[-1] == resp.json()

    # Form values stay strings, and a string id never matches
    assert client.get("/users/4").status_code == 404


def test_create_without_body_stores_empty_record(client):
    resp = client.post("/users")
    assert resp.status_code == 200
    assert resp.json() == {}
    assert len(client.get("/users").json()) == 4


def test_update_from_form_body(client):
    resp = client.put("/users/1", data={"name": "x", "email": "y"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "x", "email": "y"}


def test_update_changes_only_name_and_email(client, store):
    store.create({"id": 5, "name": "five", "email": "5@b.com", "role": "admin"})

    resp = client.put("/users/5", json={"name": "x", "email": "y", "id": 42, "role": "guest"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 5, "name": "x", "email": "y", "role": "admin"}
    assert client.get("/users/5").json() == resp.json()


def test_update_seeded_user(client):
    resp = client.put("/users/1", json={"name": "x", "email": "y"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "x", "email": "y"}


def test_update_without_body_clears_fields(client):
    resp = client.put("/users/3")
    assert resp.status_code == 200
    assert resp.json() == {"id": 3}


def test_delete_returns_remaining_users(client):
    resp = client.delete("/users/2")
    assert resp.status_code == 200
    assert [u["id"] for u in resp.json()] == [1, 3]
    assert client.get("/users/2").status_code == 404


def test_delete_removes_every_duplicate(client):
    client.post("/users", json={"id": 2, "name": "again", "email": "again@b.com"})

    resp = client.delete("/users/2")
    assert resp.status_code == 200
    assert all(u["id"] != 2 for u in resp.json())
    assert len(resp.json()) == 2


def test_path_id_parsed_like_parse_int(client):
    assert client.get("/users/2abc").json()["id"] == 2
    assert client.get("/users/3.9").json()["id"] == 3
    assert client.get("/users/0x1").json()["id"] == 1

    resp = client.get("/users/\u0661")
    assert resp.status_code == 404
    assert resp.json() == NOT_FOUND


def test_health_reports_user_count(client):
    client.post("/users", json={"id": 4, "name": "user4", "email": "a@b.com"})
    resp = client.get("/health/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "application": "User API", "users": 4}
