from showcase.auth import hash_password, verify_password
from showcase.profanity import contains_profanity
from showcase.services import users
from showcase.services.categories import seed_default_categories, list_categories


def test_password_hashing():
    hashed = hash_password("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("secret123", "not-a-bcrypt-hash")


def test_authenticate_reasons(db, make_user):
    users.create_local_user(db, "local@example.com", "secret123")
    make_user("google_1", email="social@example.com", provider="google")

    user, reason = users.authenticate(db, "local@example.com", "secret123")
    assert user is not None and reason is None

    assert users.authenticate(db, "local@example.com", "nope")[1] == "Incorrect password"
    assert users.authenticate(db, "missing@example.com", "secret123")[1] == "Email is not registered"
    assert users.authenticate(db, "social@example.com", "secret123")[0] is None


def test_upsert_oauth_user_is_stable_across_logins(db):
    first = users.upsert_oauth_user(db, "github", "42", "octo@example.com", "https://a/1.png")
    second = users.upsert_oauth_user(db, "github", "42", None, "https://a/2.png")

    assert first.id == second.id == "github_42"
    assert second.email == "octo@example.com"
    assert second.profile_image_url == "https://a/2.png"
    assert second.has_set_nickname is False


def test_validate_nickname(db, make_user):
    make_user("taken", nickname="maker_01")

    assert users.validate_nickname(db, "새로운_닉")[0]
    assert not users.validate_nickname(db, "x")[0]
    assert not users.validate_nickname(db, "has space")[0]
    assert not users.validate_nickname(db, "maker_01")[0]
    assert users.validate_nickname(db, "maker_01", exclude_user_id="taken")[0]
    assert not users.validate_nickname(db, "shithead")[0]


def test_update_profile_marks_nickname_set(db, make_user):
    user = make_user()

    updated = users.update_profile(db, user, nickname="builder")

    assert updated.nickname == "builder"
    assert updated.has_set_nickname is True


def test_profanity_scan_is_case_insensitive():
    assert contains_profanity("What the FUCK")
    assert contains_profanity("이런 병신")
    assert not contains_profanity("Nice project!")
    assert not contains_profanity(None)


def test_seeding_categories_is_idempotent(db, make_category):
    make_category("game", "게임")

    created = seed_default_categories(db)
    again = seed_default_categories(db)

    assert "game" not in {c.slug for c in created}
    assert len(created) == 6
    assert again == []
    assert len(list_categories(db)) == 7
