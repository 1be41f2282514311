"""Employee Routes - verifies the HTTP contract of every employee operation.

Invariants:
    - register returns 201 with a numeric id and a hashed password
    - get/update/delete on an absent id return 404 {"error": "Employee not found with id: <id>"}
    - update never changes the stored password hash
    - delete returns 204; batch delete returns 204 even when some ids are absent
"""

from sqlalchemy import func, select

from employee_registry.infrastructure.password_hasher import get_password_hasher
from employee_registry.models.employee import Employee

API = "/api/employees"


# --- create -------------------------------------------------------------------

async def test_register_returns_201_with_id(client, employee_payload):
    res = await client.post(f"{API}/register", json=employee_payload)
    assert res.status_code == 201
    body = res.json()
    assert isinstance(body["id"], int)
    assert body["firstName"] == "A"
    assert body["lastName"] == "B"
    assert body["email"] == "a@b.com"
    assert body["role"] == "dev"


async def test_register_stores_hash_not_plaintext(client, employee_payload):
    res = await client.post(f"{API}/register", json=employee_payload)
    stored = res.json()["password"]
    assert stored != "secret123"
    assert get_password_hasher().verify("secret123", stored)


async def test_register_defaults_role_to_user(client, employee_payload):
    del employee_payload["role"]
    res = await client.post(f"{API}/register", json=employee_payload)
    assert res.status_code == 201
    assert res.json()["role"] == "USER"


async def test_register_duplicate_email_returns_409(client, registered, employee_payload):
    res = await client.post(f"{API}/register", json=employee_payload)
    assert res.status_code == 409
    assert res.json() == {"error": "Employee already exists with email: a@b.com"}


# --- list / get ---------------------------------------------------------------

async def test_list_returns_all_employees_in_id_order(client, employee_payload):
    for i in range(3):
        payload = {**employee_payload, "email": f"user{i}@example.com"}
        await client.post(f"{API}/register", json=payload)

    res = await client.get(API)
    assert res.status_code == 200
    emails = [e["email"] for e in res.json()]
    assert emails == ["user0@example.com", "user1@example.com", "user2@example.com"]


async def test_list_empty_store_returns_empty_array(client):
    res = await client.get(API)
    assert res.status_code == 200
    assert res.json() == []


async def test_get_returns_created_record(client, registered):
    res = await client.get(f"{API}/{registered['id']}")
    assert res.status_code == 200
    assert res.json() == registered


async def test_get_missing_returns_404(client):
    res = await client.get(f"{API}/99999")
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found with id: 99999"}


# --- update -------------------------------------------------------------------

async def test_update_overwrites_profile_fields(client, registered):
    res = await client.put(
        f"{API}/{registered['id']}",
        json={"firstName": "A2", "lastName": "B2", "email": "a2@b.com", "role": "lead"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == registered["id"]
    assert body["firstName"] == "A2"
    assert body["lastName"] == "B2"
    assert body["email"] == "a2@b.com"
    assert body["role"] == "lead"


async def test_update_ignores_password_in_body(client, registered):
    res = await client.put(
        f"{API}/{registered['id']}",
        json={
            "firstName": "A", "lastName": "B", "email": "a@b.com",
            "role": "dev", "password": "another-password",
        },
    )
    assert res.status_code == 200
    assert res.json()["password"] == registered["password"]


async def test_update_missing_returns_404_and_creates_nothing(
    client, employee_payload, test_session_factory,
):
    res = await client.put(f"{API}/99999", json=employee_payload)
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found with id: 99999"}

    async with test_session_factory() as db:
        count = await db.scalar(select(func.count()).select_from(Employee))
    assert count == 0


async def test_update_to_taken_email_returns_409(client, registered, employee_payload):
    other = await client.post(
        f"{API}/register", json={**employee_payload, "email": "other@b.com"},
    )
    res = await client.put(
        f"{API}/{other.json()['id']}",
        json={"firstName": "O", "lastName": "P", "email": "a@b.com", "role": "dev"},
    )
    assert res.status_code == 409


async def test_update_keeping_own_email_succeeds(client, registered):
    res = await client.put(
        f"{API}/{registered['id']}",
        json={"firstName": "Z", "lastName": "B", "email": "a@b.com", "role": "dev"},
    )
    assert res.status_code == 200


# --- delete -------------------------------------------------------------------

async def test_delete_returns_204_then_get_returns_404(client, registered):
    res = await client.delete(f"{API}/{registered['id']}")
    assert res.status_code == 204
    assert res.content == b""

    res = await client.get(f"{API}/{registered['id']}")
    assert res.status_code == 404


async def test_delete_missing_returns_404(client):
    res = await client.delete(f"{API}/99999")
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found with id: 99999"}


async def test_batch_delete_mixed_ids_returns_204(client, employee_payload):
    ids = []
    for i in range(3):
        res = await client.post(
            f"{API}/register", json={**employee_payload, "email": f"b{i}@example.com"},
        )
        ids.append(res.json()["id"])

    res = await client.post(f"{API}/batch/delete", json=[ids[0], ids[2], 99999])
    assert res.status_code == 204

    remaining = [e["id"] for e in (await client.get(API)).json()]
    assert remaining == [ids[1]]


async def test_batch_delete_empty_list_returns_204(client, registered):
    res = await client.post(f"{API}/batch/delete", json=[])
    assert res.status_code == 204
    assert len((await client.get(API)).json()) == 1


# --- end to end ---------------------------------------------------------------

async def test_register_fetch_update_delete_lifecycle(client, employee_payload):
    created = await client.post(f"{API}/register", json=employee_payload)
    assert created.status_code == 201
    employee = created.json()
    assert isinstance(employee["id"], int)
    assert employee["password"] != "secret123"

    fetched = await client.get(f"{API}/{employee['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == employee

    updated = await client.put(
        f"{API}/{employee['id']}",
        json={**employee_payload, "firstName": "A2", "role": "lead"},
    )
    assert updated.status_code == 200
    assert updated.json()["firstName"] == "A2"
    assert updated.json()["role"] == "lead"
    assert updated.json()["password"] == employee["password"]

    deleted = await client.delete(f"{API}/{employee['id']}")
    assert deleted.status_code == 204

    gone = await client.get(f"{API}/{employee['id']}")
    assert gone.status_code == 404


# --- id bounds ----------------------------------------------------------------

async def test_largest_storable_id_is_not_found(client):
    res = await client.get(f"{API}/{2 ** 63 - 1}")
    assert res.status_code == 404


async def test_id_beyond_64_bits_is_rejected_as_input(client):
    for method in ("get", "delete"):
        res = await getattr(client, method)(f"{API}/99999999999999999999")
        assert res.status_code == 400
        assert set(res.json()) == {"id"}


async def test_update_with_id_beyond_64_bits_is_rejected(client, employee_payload):
    res = await client.put(f"{API}/99999999999999999999", json=employee_payload)
    assert res.status_code == 400
    assert "id" in res.json()


async def test_batch_delete_with_id_beyond_64_bits_is_malformed(client):
    res = await client.post(f"{API}/batch/delete", json=[1, 2 ** 64])
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON format. Please check your request body."}
