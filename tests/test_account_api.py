"""
Endpoint tests for account deletion.
"""

from __future__ import annotations

from travexa.interfaces.supabase_admin import USER_TABLES


AUTH = {"Authorization": "Bearer jwt-alice"}


def seed(backend) -> None:
    backend.tables = {
        "trips": [{"id": 1, "user_id": "user-alice"}, {"id": 2, "user_id": "user-bob"}],
        "profiles": [{"user_id": "user-alice"}],
        "user_follows": [
            {"user_id": "user-bob", "follower_id": "user-bob", "following_id": "user-alice"},
            {"user_id": "user-bob", "follower_id": "user-bob", "following_id": "user-carol"},
        ],
        "messages": [{"user_id": "user-bob", "sender_id": "user-bob", "recipient_id": "user-alice"}],
    }


def test_deletes_owned_rows_and_auth_user(client, supabase_backend) -> None:
    seed(supabase_backend)

    response = client.delete("/api/account", headers=AUTH)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Account deleted successfully"}
    assert supabase_backend.tables["trips"] == [{"id": 2, "user_id": "user-bob"}]
    assert supabase_backend.tables["profiles"] == []
    assert [r["following_id"] for r in supabase_backend.tables["user_follows"]] == ["user-carol"]
    assert supabase_backend.tables["messages"] == []
    assert supabase_backend.deleted_users == ["user-alice"]


def test_every_user_table_is_visited(client, supabase_backend) -> None:
    client.delete("/api/account", headers=AUTH)
    assert set(USER_TABLES) <= set(supabase_backend.tables)


def test_missing_table_is_skipped(client, supabase_backend) -> None:
    seed(supabase_backend)
    supabase_backend.failing_tables = {"ticket_verifications"}

    response = client.delete("/api/account", headers=AUTH)

    assert response.status_code == 200
    assert supabase_backend.deleted_users == ["user-alice"]


def test_missing_authorization_header(client, supabase_backend) -> None:
    response = client.delete("/api/account")
    assert response.status_code == 500
    assert response.json() == {"error": "No authorization header"}
    assert supabase_backend.deleted_users == []


def test_invalid_token(client, supabase_backend) -> None:
    response = client.delete("/api/account", headers={"Authorization": "Bearer forged"})
    assert response.status_code == 500
    assert response.json() == {"error": "Invalid user token"}


def test_auth_user_delete_failure(client, supabase_backend) -> None:
    supabase_backend.fail_auth_delete = True
    response = client.delete("/api/account", headers=AUTH)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete auth user: auth backend down"}


def test_not_configured(client, supabase) -> None:
    supabase.service_key = ""
    response = client.delete("/api/account", headers=AUTH)
    assert response.status_code == 500
    assert response.json() == {"error": "Supabase admin client is not configured"}
