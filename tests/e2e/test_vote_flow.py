"""End-to-end tests for voting through the HTTP API."""

import asyncio
from uuid import uuid4

import pytest
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from blog.domain.repository import UserRepository
from blog.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container() -> AsyncContainer:
    """Test container; its in-memory repositories outlive single requests."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(container))


def promote_to_admin(container: AsyncContainer, name: str) -> None:
    """Grant admin rights to a registered user, bypassing the API."""

    async def promote() -> None:
        users = await container.get(UserRepository)
        user = await users.find_by_email(f"{name.lower()}@example.com")
        assert user is not None
        await users.save(user.model_copy(update={"is_admin": True}))

    asyncio.run(promote())


def register(client: TestClient, name: str) -> dict[str, str]:
    """Register a user and return bearer auth headers."""
    response = client.post(
        "/auth/register",
        json={
            "name": name,
            "email": f"{name.lower()}@example.com",
            "password": "secret123",
        },
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def create_post(client: TestClient, headers: dict[str, str]) -> str:
    response = client.post(
        "/posts", json={"title": "Hello", "content": "World"}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["post_id"]


class TestPostVoting:
    """Voting on posts end to end."""

    def test_two_voter_scenario(self, client):
        """A +1, B +1, A changes to -1, B retracts: total ends at -1."""
        # Arrange
        alice = register(client, "Alice")
        bob = register(client, "Bob")
        post_id = create_post(client, alice)

        # Act & Assert
        r = client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=alice)
        assert r.status_code == 201
        assert r.json()["status"] == "created"
        assert r.json()["total_votes"] == 1

        r = client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=bob)
        assert r.json()["total_votes"] == 2

        r = client.post(f"/posts/{post_id}/vote", params={"vote": -1}, headers=alice)
        assert r.status_code == 200
        assert r.json()["status"] == "updated"
        assert r.json()["total_votes"] == 0

        r = client.delete(f"/posts/{post_id}/vote", headers=bob)
        assert r.status_code == 200
        assert r.json()["status"] == "removed"
        assert r.json()["total_votes"] == -1

        post = client.get(f"/posts/{post_id}", headers=alice).json()
        assert post["total_votes"] == -1
        assert post["user_vote"] == -1

    def test_duplicate_vote_is_ok_and_unchanged(self, client):
        """Re-sending the same vote returns 200 with status duplicate."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)
        client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=alice)

        r = client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=alice)

        assert r.status_code == 200
        assert r.json()["status"] == "duplicate"
        assert r.json()["total_votes"] == 1

    def test_retract_without_vote_is_ok(self, client):
        """Retracting nothing is a successful no-op."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)

        r = client.delete(f"/posts/{post_id}/vote", headers=alice)

        assert r.status_code == 200
        assert r.json()["status"] == "nothing_to_remove"
        assert r.json()["vote"] is None

    def test_invalid_value_is_400(self, client):
        """A vote of 2 is rejected and nothing is recorded."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)

        r = client.post(f"/posts/{post_id}/vote", params={"vote": 2}, headers=alice)

        assert r.status_code == 400
        votes = client.get("/votes", headers=alice).json()
        assert votes["total"] == 0

    def test_missing_post_is_404(self, client):
        """Voting on an unknown post is not found."""
        alice = register(client, "Alice")

        r = client.post(f"/posts/{uuid4()}/vote", params={"vote": 1}, headers=alice)

        assert r.status_code == 404

    def test_voting_requires_auth(self, client):
        """Anonymous callers cannot vote or list votes."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)

        assert client.post(f"/posts/{post_id}/vote", params={"vote": 1}).status_code == 401
        assert client.get("/votes").status_code == 401


class TestCommentVoting:
    """Voting on comments and clearing comment votes."""

    def test_clear_comment_votes_by_post_author(self, client):
        """The post author can clear every vote on the post's comments."""
        # Arrange
        alice = register(client, "Alice")
        bob = register(client, "Bob")
        post_id = create_post(client, alice)
        comment = client.post(
            f"/posts/{post_id}/comments", json={"text": "First!"}, headers=bob
        )
        assert comment.status_code == 201
        comment_id = comment.json()["comment_id"]
        client.post(f"/comments/{comment_id}/vote", params={"vote": 1}, headers=alice)
        client.post(f"/comments/{comment_id}/vote", params={"vote": -1}, headers=bob)
        client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=bob)

        # Act
        forbidden = client.delete(f"/posts/{post_id}/comments/votes", headers=bob)
        cleared = client.delete(f"/posts/{post_id}/comments/votes", headers=alice)

        # Assert
        assert forbidden.status_code == 403
        assert cleared.status_code == 200
        assert cleared.json()["deleted_count"] == 2
        remaining = client.get("/votes", headers=alice).json()
        assert [v["votable_id"] for v in remaining["votes"]] == [post_id]

    def test_list_votes_filtered_by_target(self, client):
        """The target_id filter narrows the vote listing."""
        alice = register(client, "Alice")
        first = create_post(client, alice)
        second = create_post(client, alice)
        client.post(f"/posts/{first}/vote", params={"vote": 1}, headers=alice)
        client.post(f"/posts/{second}/vote", params={"vote": -1}, headers=alice)

        r = client.get("/votes", params={"target_id": second}, headers=alice)

        assert r.status_code == 200
        assert r.json()["total"] == 1
        assert r.json()["votes"][0]["value"] == -1

    def test_deleting_post_removes_its_votes(self, client):
        """Deleting a post cascades to comments and votes."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)
        comment_id = client.post(
            f"/posts/{post_id}/comments", json={"text": "hi"}, headers=alice
        ).json()["comment_id"]
        client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=alice)
        client.post(f"/comments/{comment_id}/vote", params={"vote": 1}, headers=alice)

        r = client.delete(f"/posts/{post_id}", headers=alice)

        assert r.status_code == 200
        assert r.json()["votes_deleted"] == 2
        assert client.get("/votes", headers=alice).json()["total"] == 0
        assert client.get(f"/posts/{post_id}").status_code == 404


class TestMalformedVoteValue:
    """Vote values that are not -1, 0 or 1 are a 400, never a 422."""

    @pytest.mark.parametrize("params", [{"vote": "abc"}, {"vote": "1.5"}, {}])
    def test_malformed_post_vote_is_400(self, client, params):
        """Non-numeric, fractional or missing values are invalid input."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)

        r = client.post(f"/posts/{post_id}/vote", params=params, headers=alice)

        assert r.status_code == 400
        assert post_id in r.json()["detail"]
        assert client.get("/votes", headers=alice).json()["total"] == 0

    @pytest.mark.parametrize("params", [{"vote": "abc"}, {"vote": "1.5"}, {}])
    def test_malformed_comment_vote_is_400(self, client, params):
        """Comments validate the value the same way."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)
        comment_id = client.post(
            f"/posts/{post_id}/comments", json={"text": "hi"}, headers=alice
        ).json()["comment_id"]

        r = client.post(f"/comments/{comment_id}/vote", params=params, headers=alice)

        assert r.status_code == 400

    def test_anonymous_malformed_vote_is_401(self, client):
        """Authentication is checked before the value."""
        alice = register(client, "Alice")
        post_id = create_post(client, alice)

        r = client.post(f"/posts/{post_id}/vote", params={"vote": "abc"})

        assert r.status_code == 401


class TestTallyMaintenance:
    """Admin endpoints that keep tallies equal to their votes."""

    def test_admin_recomputes_post_tally(self, client, container):
        """Recomputing a consistent tally returns the same total."""
        alice = register(client, "Alice")
        bob = register(client, "Bob")
        promote_to_admin(container, "Alice")
        post_id = create_post(client, bob)
        client.post(f"/posts/{post_id}/vote", params={"vote": -1}, headers=bob)

        r = client.post(f"/posts/{post_id}/votes/recompute", headers=alice)

        assert r.status_code == 200
        assert r.json()["total_votes"] == -1
        assert r.json()["votable_type"] == "post"

    def test_recompute_requires_admin(self, client):
        """Regular users get 403."""
        bob = register(client, "Bob")
        post_id = create_post(client, bob)

        r = client.post(f"/posts/{post_id}/votes/recompute", headers=bob)

        assert r.status_code == 403

    def test_deleting_a_voter_updates_tallies(self, client, container):
        """An admin deleting a voter takes the voter's vote off the total."""
        alice = register(client, "Alice")
        bob = register(client, "Bob")
        promote_to_admin(container, "Alice")
        post_id = create_post(client, alice)
        client.post(f"/posts/{post_id}/vote", params={"vote": 1}, headers=bob)
        bob_id = client.get("/auth/me", headers=bob).json()["user_id"]

        r = client.delete(f"/users/{bob_id}", headers=alice)

        assert r.status_code == 200
        assert r.json()["votes_retracted"] == 1
        assert client.get(f"/posts/{post_id}").json()["total_votes"] == 0
        assert client.get("/votes", headers=alice).json()["total"] == 0
