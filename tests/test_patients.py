import pytest

from app.modules.patients.models import Gender, Patient
from factories import patient_factory


@pytest.mark.asyncio
async def test_create_patient(client, session, auth_headers):
    body = {"name": "Jane Doe", "phone": "9876543210", "email": "j@x.com", "age": 30, "gender": "female"}

    response = await client.post("/patient", json=body, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert "deleted" not in data
    for key, value in body.items():
        assert data[key] == value

    row = await session.get(Patient, data["id"])
    assert row.deleted is False
    assert row.name == "Jane Doe"


@pytest.mark.asyncio
async def test_create_patient_requires_token(client):
    body = {"name": "Jane Doe", "gender": "female"}

    response = await client.post("/patient", json=body)

    assert response.status_code == 401
    assert response.json()["errors"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value",
    [
        ("name", "Jo"),
        ("name", None),
        ("name", 10),
        ("phone", "12345"),
        ("email", "not-an-email"),
        ("age", 121),
        ("age", -1),
        ("gender", "other"),
        ("gender", None),
    ],
)
async def test_create_patient_validation(client, auth_headers, field, value):
    body = {"name": "Jane Doe", "phone": "9876543210", "email": "j@x.com", "age": 30, "gender": "female"}
    body[field] = value

    response = await client.post("/patient", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert "id" not in response.json()
    assert response.json()["errors"]


@pytest.mark.asyncio
async def test_get_soft_deleted_patient_is_not_found(client, session, auth_headers):
    patient = await patient_factory(session, deleted=True)

    response = await client.get(f"/patient/{patient.id}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"errors": [{"message": f"Patient with id: {patient.id} not found"}]}


@pytest.mark.asyncio
async def test_update_patient(client, session, auth_headers):
    patient = await patient_factory(session)
    await session.refresh(patient)
    before = patient.updated_at

    body = {"name": "Jane Smith", "gender": "female", "age": 31}
    response = await client.put(f"/patient/{patient.id}", json=body, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jane Smith"
    assert data["age"] == 31
    assert data["phone"] is None
    assert "deleted" not in data

    await session.refresh(patient)
    assert patient.updated_at > before
    assert patient.phone is None


@pytest.mark.asyncio
async def test_update_missing_patient_leaves_store_unchanged(client, session, auth_headers):
    patient = await patient_factory(session, deleted=True)

    response = await client.put(
        f"/patient/{patient.id}", json={"name": "Someone Else", "gender": "male"}, headers=auth_headers
    )

    assert response.status_code == 404
    await session.refresh(patient)
    assert patient.name != "Someone Else"
    assert patient.deleted is True


@pytest.mark.asyncio
async def test_delete_patient_twice(client, session, auth_headers):
    patient = await patient_factory(session)

    first = await client.delete(f"/patient/{patient.id}", headers=auth_headers)
    second = await client.delete(f"/patient/{patient.id}", headers=auth_headers)

    assert first.status_code == 204
    assert second.status_code == 404
    await session.refresh(patient)
    assert patient.deleted is True


@pytest.mark.asyncio
async def test_delete_patient_touches_updated_at(client, session, auth_headers):
    patient = await patient_factory(session)
    await session.refresh(patient)
    before = patient.updated_at

    response = await client.delete(f"/patient/{patient.id}", headers=auth_headers)

    assert response.status_code == 204
    await session.refresh(patient)
    assert patient.updated_at > before


@pytest.mark.asyncio
async def test_list_patients_excludes_deleted(client, session, auth_headers):
    live = [await patient_factory(session) for _ in range(3)]
    await patient_factory(session, deleted=True)

    response = await client.get("/patient", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [p["id"] for p in body["data"]] == [p.id for p in reversed(live)]
    assert all("deleted" not in p for p in body["data"])


@pytest.mark.asyncio
async def test_list_patients_filters_by_gender(client, session, auth_headers):
    await patient_factory(session, gender=Gender.male)
    await patient_factory(session, gender=Gender.female)

    response = await client.get("/patient", params={"gender": "male"}, headers=auth_headers)

    assert response.status_code == 200
    assert [p["gender"] for p in response.json()["data"]] == ["male"]
