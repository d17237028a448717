import json

from petstore.api import SHAPE_EXAMPLE


def test_list_pets_returns_seed_data(client):
    response = client.get("/pets")

    assert response.status_code == 200
    assert response.json() == {"pets": [{"id": 1, "name": "max"}, {"id": 2, "name": "moritz"}]}


def test_json_responses_are_pretty_printed(client):
    response = client.get("/pets/1")

    assert response.headers["content-type"].startswith("application/json")
    assert response.text == '{\n  "id": 1,\n  "name": "max"\n}'


def test_create_pet_assigns_next_id_and_ignores_client_id(client, store):
    response = client.post("/pets", json={"id": 99, "name": "felix"})

    assert response.status_code == 201
    assert response.json() == {"id": 3, "name": "felix"}
    assert store.find(3).name == "felix"
    assert store.find(99) is None


def test_create_pet_without_name_is_rejected(client, store):
    response = client.post("/pets", json={"id": 5})

    assert response.status_code == 422
    assert len(store) == 2


def test_create_pet_with_invalid_json_is_rejected(client):
    response = client.post("/pets", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 422


def test_find_pet(client):
    response = client.get("/pets/2")

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "moritz"}


def test_find_missing_pet_returns_404(client):
    response = client.get("/pets/42")

    assert response.status_code == 404
    assert response.json() == {"detail": "Pet 42 not found"}


def test_non_integer_pet_id_is_rejected(client):
    assert client.get("/pets/max").status_code == 422


def test_update_pet_moves_it_to_the_end(client):
    response = client.put("/pets/1", json={"id": 1, "name": "maximilian"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "maximilian"}
    assert client.get("/pets").json()["pets"] == [{"id": 2, "name": "moritz"}, {"id": 1, "name": "maximilian"}]


def test_update_with_mismatched_id_returns_404_without_changes(client):
    response = client.put("/pets/1", json={"id": 2, "name": "impostor"})

    assert response.status_code == 404
    assert client.get("/pets").json()["pets"] == [{"id": 1, "name": "max"}, {"id": 2, "name": "moritz"}]


def test_update_missing_pet_returns_404(client):
    assert client.put("/pets/9", json={"id": 9, "name": "ghost"}).status_code == 404


def test_delete_pet_returns_empty_body(client, store):
    response = client.delete("/pets/2")

    assert response.status_code == 200
    assert response.content == b""
    assert [pet.id for pet in store.list()] == [1]


def test_delete_missing_pet_returns_404(client, store):
    response = client.delete("/pets/2")
    response = client.delete("/pets/2")

    assert response.status_code == 404
    assert len(store) == 1


def test_deleted_ids_are_not_reused(client):
    client.delete("/pets/2")

    assert client.post("/pets", json={"name": "moritz"}).json() == {"id": 3, "name": "moritz"}


def test_generic_pets_wraps_collection_in_elements(client):
    client.post("/pets", json={"name": "felix"})

    response = client.get("/genericPets")

    assert response.status_code == 200
    assert response.json() == {
        "elements": [
            {"id": 1, "name": "max"},
            {"id": 2, "name": "moritz"},
            {"id": 3, "name": "felix"},
        ]
    }


def test_shapes_is_static(client):
    client.delete("/pets/1")

    response = client.get("/shapes")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.text == SHAPE_EXAMPLE
    assert json.loads(response.text) == {"a": 10, "b": 25}


def test_request_info_echoes_parameters_and_headers(client):
    response = client.get("/request/info", params={"mandatoryParameter": "5"}, headers={"X-Demo": "yes"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    parameters, headers = response.text.split("\n\n")
    assert parameters == "parameter:\nmandatoryParameter: 5"
    assert headers.startswith("header:\n")
    assert "x-demo: yes" in headers.splitlines()


def test_with_query_parameter_does_not_require_documented_parameters(client):
    response = client.get("/request/withQueryParameter")

    assert response.status_code == 200
    assert response.text.startswith("parameter:\n\nheader:\n")


def test_with_query_parameter_echoes_repeated_values(client):
    response = client.get("/request/withQueryParameter?mandatoryParameter=5&optionalParameter=a&optionalParameter=b")

    assert response.text.split("\n\n")[0] == (
        "parameter:\nmandatoryParameter: 5\noptionalParameter: a\noptionalParameter: b"
    )


def test_with_header_echoes_headers(client):
    response = client.get("/request/withHeader", headers={"mandatoryHeader": "3"})

    assert response.status_code == 200
    assert "mandatoryheader: 3" in response.text.splitlines()


def test_root_redirects_to_swagger_ui(client):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/docs"


def test_swagger_ui_is_served(client):
    response = client.get("/docs")

    assert response.status_code == 200
    assert "swagger-ui" in response.text


def test_default_headers_are_set(client):
    response = client.get("/pets")

    assert response.headers["server"] == "petstore-docs/0.1"
    assert float(response.headers["x-request-latency-ms"]) >= 0


def test_large_responses_are_compressed(client):
    for index in range(100):
        client.post("/pets", json={"name": f"pet-{index}"})

    response = client.get("/pets", headers={"Accept-Encoding": "gzip"})

    assert response.headers["content-encoding"] == "gzip"
    assert len(response.json()["pets"]) == 102


def test_requests_are_logged(client, caplog):
    with caplog.at_level("INFO", logger="petstore.api"):
        client.get("/pets/1")

    record = next(record for record in caplog.records if record.getMessage() == "request")
    assert record.request_path == "/pets/1"
    assert record.method == "GET"
    assert record.status_code == 200
