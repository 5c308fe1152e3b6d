from pethub.db.create_admin import create_admin


SHOP = {
    "name": "Paws & Claws",
    "type": "grooming",
    "latitude": 14.6,
    "longitude": 121.0,
    "contact_number": "555-0100",
    "image": "https://img.pethub.io/shop.jpg",
}


def test_shops_are_public_to_read_admin_to_write(client, auth_headers, admin_headers):
    assert client.post("/shop", json=SHOP, headers=auth_headers).status_code == 403

    resp = client.post("/shop", json=SHOP, headers=admin_headers)
    assert resp.status_code == 201
    shop_id = resp.json()["id"]

    assert [s["name"] for s in client.get("/shop").json()] == ["Paws & Claws"]

    update = dict(SHOP, name="Paws", image=None)
    resp = client.put(f"/shop/{shop_id}", json=update, headers=admin_headers)
    assert resp.json()["name"] == "Paws"
    assert resp.json()["image"] == SHOP["image"]

    assert client.delete(f"/shop/{shop_id}", headers=auth_headers).status_code == 403
    assert client.delete(f"/shop/{shop_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/shop/{shop_id}").status_code == 404


def test_shop_coordinates_validated(client, admin_headers):
    assert client.post("/shop", json=dict(SHOP, latitude=120), headers=admin_headers).status_code == 422


def test_admin_routes_need_admin(client, auth_headers):
    assert client.get("/admin/stats", headers=auth_headers).status_code == 403
    assert client.get("/admin/users").status_code == 401


def test_stats(client, auth_headers, other_auth_headers, admin_headers, pet):
    client.post("/pet", json={"name": "Milo", "type": "cat"}, headers=other_auth_headers)
    client.post("/post", json={"caption": "hi", "content": ""}, headers=auth_headers)

    stats = client.get("/admin/stats", headers=admin_headers).json()

    assert stats["total_users"] == 3
    assert stats["total_pets"] == 2
    assert stats["total_posts"] == 1
    assert stats["total_shops"] == 0
    assert {row["type"]: row["count"] for row in stats["pet_type_stats"]} == {"dog": 1, "cat": 1}
    genders = {row["gender"]: row["count"] for row in stats["user_gender_stats"]}
    assert genders["female"] == 1
    assert genders["male"] == 1


def test_delete_user_cascades(client, auth_headers, admin_headers, test_user, pet):
    client.post("/post", json={"caption": "hi", "content": ""}, headers=auth_headers)

    resp = client.delete(f"/admin/users/{test_user.id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["message"]

    assert client.get("/admin/pets", headers=admin_headers).json() == []
    assert client.get("/admin/posts", headers=admin_headers).json() == []
    assert [u["email"] for u in client.get("/admin/users", headers=admin_headers).json()] == ["admin@pethub.io"]


def test_admins_cannot_be_deleted(client, admin_headers, admin_user):
    assert client.delete(f"/admin/users/{admin_user.id}", headers=admin_headers).status_code == 400


def test_admin_deletes_any_pet_and_post(client, auth_headers, admin_headers, pet):
    post = client.post("/post", json={"caption": "hi", "content": ""}, headers=auth_headers).json()

    assert client.delete(f"/admin/pets/{pet['id']}", headers=admin_headers).status_code == 200
    assert client.delete(f"/admin/posts/{post['id']}", headers=admin_headers).status_code == 200
    assert client.delete("/admin/posts/999", headers=admin_headers).status_code == 404


def test_create_admin_script_promotes_existing_user(client, test_user):
    admin = create_admin("Owner@pethub.io", "ignored")
    assert admin.id == test_user.id
    assert admin.is_admin

    resp = client.post("/auth/login", json={"email": "owner@pethub.io", "password": "secret123"})
    assert resp.json()["is_admin"] is True


def test_create_admin_script_creates_account(client):
    create_admin("root@pethub.io", "rootpass", "Root")

    resp = client.post("/auth/login", json={"email": "root@pethub.io", "password": "rootpass"})
    assert resp.status_code == 200
    assert resp.json()["user"]["full_name"] == "Root"
