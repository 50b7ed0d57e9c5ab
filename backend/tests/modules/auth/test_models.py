from modules.auth.models import (
    LoginRequest,
    RegisterRequest,
    TokenPayload,
    UpdateUserRequest,
    UserRecord,
)


def make_record(**overrides) -> UserRecord:
    fields = {
        "id": "user-123",
        "email": "jane.doe@example.com",
        "password_hash": "$2b$10$hash",
        "first_name": "Jane",
        "last_name": "Doe",
    }
    fields.update(overrides)
    return UserRecord(**fields)


class TestUserRecord:
    def test_public_projection_hides_password(self):
        """to_public should not carry the password hash."""
        public = make_record().to_public()
        dumped = public.model_dump(by_alias=True)
        assert "passwordHash" not in dumped
        assert "password_hash" not in dumped
        assert "password" not in dumped

    def test_public_projection_uses_camel_case(self):
        """Public users are serialized with camelCase keys."""
        dumped = make_record(avatar_url="https://img/a.png").to_public().model_dump(by_alias=True)
        assert dumped == {
            "id": "user-123",
            "username": "jane.doe",
            "email": "jane.doe@example.com",
            "firstName": "Jane",
            "lastName": "Doe",
            "image": "https://img/a.png",
        }

    def test_username_defaults_to_email_local_part(self):
        """Without a stored username, the part of the email before @ is used."""
        assert make_record().to_public().username == "jane.doe"

    def test_stored_username_wins(self):
        """A stored username is returned as is."""
        assert make_record(username="jd").to_public().username == "jd"


class TestRequests:
    def test_register_accepts_camel_case(self):
        """RegisterRequest should read camelCase keys."""
        request = RegisterRequest.model_validate(
            {"email": "a@b.com", "password": "pw", "firstName": "A", "lastName": "B"}
        )
        assert request.first_name == "A"
        assert request.last_name == "B"

    def test_register_fields_are_optional(self):
        """Presence is checked by the service, not the schema."""
        request = RegisterRequest.model_validate({})
        assert request.email is None
        assert request.password is None

    def test_login_uses_username_field(self):
        """The login email travels in `username`."""
        request = LoginRequest.model_validate({"username": "a@b.com", "password": "pw"})
        assert request.username == "a@b.com"

    def test_update_tracks_explicit_null(self):
        """An explicit null avatar is distinguishable from an absent one."""
        explicit = UpdateUserRequest.model_validate({"avatarUrl": None})
        absent = UpdateUserRequest.model_validate({})
        assert "avatar_url" in explicit.model_fields_set
        assert "avatar_url" not in absent.model_fields_set


class TestTokenPayload:
    def test_reads_user_id_claim(self):
        """TokenPayload should map the userId claim."""
        payload = TokenPayload(userId="user-123", email="a@b.com", iat=1, exp=2)
        assert payload.user_id == "user-123"
