from datetime import datetime, timedelta


def _create_project(client, **overrides):
    body = {"title": "Pixel Editor", "description": "Tiny sprite editor"}
    body.update(overrides)
    resp = client.post("/api/projects", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_register_login_and_current_user(client, register):
    user = register("maker@example.com")

    assert client.get("/api/user").json()["id"] == user["id"]
    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/user").status_code == 401

    bad = client.post("/api/login", json={"email": "maker@example.com", "password": "wrong-one"})
    assert bad.status_code == 401

    good = client.post("/api/login", json={"email": "maker@example.com", "password": "secret123"})
    assert good.status_code == 200
    assert "password_hash" not in good.json()


def test_register_rejects_duplicates_and_bad_input(client, register):
    register("maker@example.com")

    dup = client.post("/api/register", json={"email": "maker@example.com", "password": "secret123"})
    short = client.post("/api/register", json={"email": "new@example.com", "password": "123"})

    assert dup.status_code == 400
    assert short.status_code == 400
    assert "errors" in short.json()


def test_mutations_require_login(client):
    assert client.post("/api/projects", json={"title": "t", "description": "d"}).status_code == 401
    assert client.post("/api/projects/1/like").status_code == 401
    assert client.post("/api/feedback", json={"content": "x", "category": "bug"}).status_code == 401


def test_project_lifecycle(client, register):
    register()
    project = _create_project(client, demo_url="https://demo.example.com")

    detail = client.get(f"/api/projects/{project['id']}").json()
    assert detail["demo_url"] == "https://demo.example.com"
    assert detail["author"]["email"] == "dev@example.com"
    assert detail["is_liked"] is False

    # The detail view counts one view per request
    again = client.get(f"/api/projects/{project['id']}").json()
    assert again["view_count"] == 1

    updated = client.put(f"/api/projects/{project['id']}", json={"title": "Pixel Studio"})
    assert updated.json()["title"] == "Pixel Studio"
    assert updated.json()["description"] == "Tiny sprite editor"

    assert client.delete(f"/api/projects/{project['id']}").status_code == 200
    assert client.get(f"/api/projects/{project['id']}").status_code == 404
    assert client.get("/api/projects").json() == []


def test_other_users_cannot_edit_a_project(client, register):
    register("owner@example.com")
    project = _create_project(client)
    client.post("/api/logout")
    register("intruder@example.com")

    assert client.put(f"/api/projects/{project['id']}", json={"title": "Mine"}).status_code == 403
    assert client.delete(f"/api/projects/{project['id']}").status_code == 403
    assert client.put("/api/projects/999", json={"title": "Mine"}).status_code == 404


def test_like_toggle_and_feed_like_state(client, register):
    register()
    project = _create_project(client)

    liked = client.post(f"/api/projects/{project['id']}/like").json()
    listing = client.get("/api/projects").json()
    unliked = client.post(f"/api/projects/{project['id']}/like").json()

    assert liked == {"liked": True, "like_count": 1}
    assert listing[0]["is_liked"] is True
    assert unliked == {"liked": False, "like_count": 0}
    assert client.post("/api/projects/999/like").status_code == 404


def test_listing_parameters(client, register, db, make_category):
    register()
    games = make_category("game", "Games")
    old = _create_project(client, title="Old game", category_id=games.id)
    _create_project(client, title="Fresh tool")

    from showcase.models import Project
    db.query(Project).filter(Project.id == old["id"]).update(
        {Project.created_at: datetime.utcnow() - timedelta(days=3)}
    )
    db.commit()

    today = client.get("/api/projects", params={"timeframe": "today"}).json()
    weekly_games = client.get("/api/projects", params={"timeframe": "weekly", "categoryId": games.id}).json()
    page_two = client.get("/api/projects", params={"page": 2, "limit": 1}).json()

    assert [p["title"] for p in today] == ["Fresh tool"]
    assert [p["title"] for p in weekly_games] == ["Old game"]
    assert len(page_two) == 1
    assert client.get("/api/projects", params={"timeframe": "yearly"}).status_code == 400
    assert client.get("/api/projects", params={"categoryId": 0}).status_code == 400


def test_search_endpoint(client, register):
    register()
    _create_project(client, title="Voxel engine")
    _create_project(client, title="Budget app", description="Tracks VOXEL spending")

    found = client.get("/api/projects/search", params={"q": "voxel"}).json()

    assert {p["title"] for p in found} == {"Voxel engine", "Budget app"}
    assert client.get("/api/projects/search", params={"q": "   "}).status_code == 400


def test_comment_thread(client, register):
    register()
    project = _create_project(client)

    root = client.post(f"/api/projects/{project['id']}/comments", json={"content": "Love it"}).json()
    reply = client.post(
        f"/api/projects/{project['id']}/comments",
        json={"content": "Thanks!", "parent_id": root["id"]}
    ).json()

    tree = client.get(f"/api/projects/{project['id']}/comments").json()
    assert [c["id"] for c in tree] == [root["id"]]
    assert [r["id"] for r in tree[0]["replies"]] == [reply["id"]]
    assert client.get(f"/api/projects/{project['id']}").json()["comment_count"] == 2

    edited = client.put(f"/api/comments/{reply['id']}", json={"content": "Thanks a lot!"})
    assert edited.json()["content"] == "Thanks a lot!"

    assert client.delete(f"/api/comments/{reply['id']}").status_code == 200
    assert client.get(f"/api/projects/{project['id']}/comments").json()[0]["replies"] == []
    assert client.get(f"/api/projects/{project['id']}").json()["comment_count"] == 1


def test_comment_validation(client, register):
    register()
    project = _create_project(client)

    profane = client.post(f"/api/projects/{project['id']}/comments", json={"content": "this is shit"})
    empty = client.post(f"/api/projects/{project['id']}/comments", json={"content": ""})
    missing = client.post("/api/projects/999/comments", json={"content": "hello"})

    assert profane.status_code == 400
    assert empty.status_code == 400
    assert missing.status_code == 404


def test_feedback_endpoints(client, register):
    register("first@example.com")
    item = client.post("/api/feedback", json={"content": "Add RSS", "category": "feature"}).json()
    assert client.post("/api/feedback", json={"content": "x", "category": "praise"}).status_code == 400

    client.post("/api/logout")
    register("second@example.com")
    assert client.delete(f"/api/feedback/{item['id']}").status_code == 403

    listing = client.get("/api/feedback").json()
    assert [f["content"] for f in listing] == ["Add RSS"]
    assert listing[0]["author"]["email"] == "first@example.com"


def test_categories_init_and_list(client):
    first = client.post("/api/categories/init").json()
    second = client.post("/api/categories/init").json()

    assert first["created"] == 7
    assert second["created"] == 0
    assert len(client.get("/api/categories").json()) == 7


def test_visits_and_stats(client, register):
    register()
    _create_project(client)

    first = client.post("/api/visit", json={"session_id": "abc"}, headers={"User-Agent": "pytest"})
    repeat = client.post("/api/visit", json={"session_id": "abc"})
    client.post("/api/visit", json={"session_id": "xyz"})

    assert first.status_code == 201
    assert first.json()["user_agent"] == "pytest"
    assert repeat.json()["id"] == first.json()["id"]

    assert client.get("/api/stats").json() == {
        "total_projects": 1,
        "total_users": 1,
        "today_visits": 2,
        "total_likes": 0,
        "total_views": 0,
    }


def test_profile_and_nickname(client, register):
    register()

    check = client.post("/api/user/validate-nickname", json={"nickname": "builder"}).json()
    assert check["valid"] is True

    profile = client.put("/api/user/profile", json={"nickname": "builder"})
    assert profile.json()["has_set_nickname"] is True

    assert client.put("/api/user/profile", json={"nickname": "a"}).status_code == 400
    assert client.post("/api/user/check-email", json={"email": "dev@example.com"}).json() == {"available": False}
    assert client.post("/api/user/check-email", json={"email": "new@example.com"}).json() == {"available": True}


def test_register_rejects_passwords_longer_than_bcrypt_accepts(client):
    too_long = client.post("/api/register", json={"email": "long@example.com", "password": "p" * 100})
    multibyte = client.post("/api/register", json={"email": "wide@example.com", "password": "é" * 40})
    at_limit = client.post("/api/register", json={"email": "edge@example.com", "password": "p" * 72})

    assert too_long.status_code == 400
    assert "errors" in too_long.json()
    assert multibyte.status_code == 400
    assert at_limit.status_code == 201
