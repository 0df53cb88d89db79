def test_owner_and_pet_scenario(client):
    rv = client.post("/owners", json={"name": "Ana"})
    assert rv.status_code == 201
    assert rv.get_json()["id"] == 1

    rv = client.post("/pets", json={"name": "Rex", "species": "Perro", "owner_id": 1})
    assert rv.status_code == 201
    assert rv.get_json()["id"] == 1

    rv = client.get("/pets/1")
    assert rv.status_code == 200
    assert rv.get_json() == {
        "id": 1,
        "name": "Rex",
        "species": "Perro",
        "breed": None,
        "age": None,
        "weight": None,
        "health_condition": None,
        "owner_id": 1,
    }


def test_create_pet_with_all_fields(client, make_owner):
    owner_id = make_owner()
    rv = client.post(
        "/pets",
        json={
            "name": "Michi",
            "species": "Gato",
            "breed": "Siames",
            "age": 0,
            "weight": 3.2,
            "health_condition": "Alergia",
            "owner_id": owner_id,
        },
    )
    pet = client.get(f"/pets/{rv.get_json()['id']}").get_json()
    assert pet["age"] == 0
    assert pet["weight"] == 3.2
    assert pet["breed"] == "Siames"


def test_missing_name_and_species(client, make_owner):
    owner_id = make_owner()
    rv = client.post("/pets", json={"owner_id": owner_id})
    assert rv.status_code == 400
    details = rv.get_json()["details"]
    assert set(details) == {"name", "species"}


def test_mistyped_fields_are_not_coerced(client, make_owner):
    owner_id = make_owner()
    base = {"name": "Rex", "species": "Perro", "owner_id": owner_id}

    assert client.post("/pets", json={**base, "age": "3"}).status_code == 400
    assert client.post("/pets", json={**base, "weight": "20.5"}).status_code == 400
    assert client.post("/pets", json={**base, "owner_id": str(owner_id)}).status_code == 400
    assert client.get("/pets").get_json() == []


def test_negative_age_or_weight(client, make_owner):
    owner_id = make_owner()
    base = {"name": "Rex", "species": "Perro", "owner_id": owner_id}
    assert client.post("/pets", json={**base, "age": -1}).status_code == 400
    assert client.post("/pets", json={**base, "weight": -0.5}).status_code == 400


def test_dangling_owner_is_a_storage_error(client):
    rv = client.post("/pets", json={"name": "Rex", "species": "Perro", "owner_id": 42})
    assert rv.status_code == 500
    assert rv.get_json()["error_code"] == "STORAGE_ERROR"


def test_list_pets(client, make_owner, make_pet):
    owner_id = make_owner()
    make_pet("Rex", owner_id=owner_id)
    make_pet("Luna", "Gato", owner_id=owner_id)
    names = [p["name"] for p in client.get("/pets").get_json()]
    assert names == ["Rex", "Luna"]


def test_get_missing_pet(client):
    rv = client.get("/pets/404")
    assert rv.status_code == 404
    assert rv.get_json() == {"error_code": "NOT_FOUND", "message": "Pet not found"}


def test_non_numeric_id_is_not_found(client):
    rv = client.get("/pets/abc")
    assert rv.status_code == 404
    assert rv.get_json()["error_code"] == "NOT_FOUND"


def test_update_missing_pet_changes_nothing(client, sample_data):
    before = client.get("/pets").get_json()
    rv = client.put("/pets/999", json={"name": "Ghost", "species": "Gato"})
    assert rv.status_code == 404
    assert client.get("/pets").get_json() == before


def test_update_requires_name_and_species(client, sample_data):
    rv = client.put(f"/pets/{sample_data['pet_id']}", json={"breed": "Mix"})
    assert rv.status_code == 400
    assert set(rv.get_json()["details"]) == {"name", "species"}


def test_update_replaces_the_whole_row(client, sample_data):
    pet_id = sample_data["pet_id"]
    rv = client.put(f"/pets/{pet_id}", json={"name": "Rex", "species": "Perro", "age": 4})
    assert rv.status_code == 200

    pet = client.get(f"/pets/{pet_id}").get_json()
    assert pet["age"] == 4
    assert pet["breed"] is None
    assert pet["weight"] is None
    assert pet["health_condition"] is None
    assert pet["owner_id"] == sample_data["owner_id"]


def test_update_can_move_pet_to_another_owner(client, sample_data, make_owner):
    new_owner = make_owner("Carlos")
    pet_id = sample_data["pet_id"]
    rv = client.put(
        f"/pets/{pet_id}",
        json={"name": "Rex", "species": "Perro", "owner_id": new_owner},
    )
    assert rv.status_code == 200
    assert client.get(f"/pets/{pet_id}").get_json()["owner_id"] == new_owner


def test_delete_pet_twice(client, make_pet):
    pet_id = make_pet()
    assert client.delete(f"/pets/{pet_id}").status_code == 200
    assert client.delete(f"/pets/{pet_id}").status_code == 404
    assert client.get(f"/pets/{pet_id}").status_code == 404


def test_method_not_allowed_is_json(client):
    rv = client.patch("/pets/1", json={})
    assert rv.status_code == 405
    assert rv.get_json()["error_code"] == "METHOD_NOT_ALLOWED"


def test_index(client):
    rv = client.get("/")
    assert rv.get_json() == {"message": "PetCare Tracker API running"}


def test_id_beyond_integer_range_is_not_found(client):
    huge = 10**20
    for method in (client.get, client.delete):
        rv = method(f"/pets/{huge}")
        assert rv.status_code == 404
        assert rv.get_json()["error_code"] == "NOT_FOUND"
    rv = client.put(f"/pets/{huge}", json={"name": "Rex", "species": "Perro"})
    assert rv.status_code == 404
    assert client.get(f"/vaccines/pet/{huge}").status_code == 404
    assert client.delete(f"/owners/{huge}").status_code == 404


def test_integers_beyond_integer_range_are_rejected(client, make_owner):
    owner_id = make_owner()
    base = {"name": "Rex", "species": "Perro", "owner_id": owner_id}
    for field in ("age", "owner_id"):
        rv = client.post("/pets", json={**base, field: 10**30})
        assert rv.status_code == 400, field
        body = rv.get_json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert field in body["details"]
    rv = client.post(
        "/vaccines", json={"name": "Rabies", "application_date": "2025-01-01", "pet_id": 10**30}
    )
    assert rv.status_code == 400
    assert "pet_id" in rv.get_json()["details"]
    assert client.get("/pets").get_json() == []


def test_unknown_path_next_to_client_prefix_is_json(client):
    rv = client.get("/apple")
    assert rv.status_code == 404
    assert rv.get_json()["error_code"] == "NOT_FOUND"
