"""End-to-end test of a suggestion from submission to publication."""

from httpx import AsyncClient

VIDEO_URL = "https://youtube.com/watch?v=abc12345678"


class TestBoardWorkflow:
    """Test the full request, review, vote and publish flow."""

    async def test_suggestion_to_published_video(
        self, test_client_with_db: AsyncClient, admin_headers: dict
    ):
        """Test a request travels through every stage and keeps its votes."""
        client = test_client_with_db

        # Submit
        response = await client.post(
            "/api/suggestions/",
            json={
                "title": "Best Python tips",
                "description": "Short tips every Python developer should know",
                "requester_name": "Sam Doe",
                "requester_email": "sam@example.com",
                "channel": "cbb",
            },
        )
        assert response.status_code == 201
        suggestion = response.json()
        suggestion_id = suggestion["id"]
        transition_url = f"/api/admin/suggestions/{suggestion_id}/transition"
        assert suggestion["status"] == "hidden"

        # Review
        response = await client.post(transition_url, json={"status": "pending_review"}, headers=admin_headers)
        assert response.json()["status"] == "pending_review"
        assert (await client.get(f"/api/suggestions/{suggestion_id}")).status_code == 404

        response = await client.post(transition_url, json={"status": "open_for_voting"}, headers=admin_headers)
        assert response.json()["status"] == "open_for_voting"

        # Vote
        for email in ("first@example.com", "second@example.com"):
            response = await client.post(
                f"/api/suggestions/{suggestion_id}/vote", json={"voter_email": email}
            )
            assert response.status_code == 201
        assert response.json()["votes_count"] == 2

        # Produce
        response = await client.post(transition_url, json={"status": "in_progress"}, headers=admin_headers)
        assert response.json()["status"] == "in_progress"
        assert response.json()["votes_count"] == 2

        response = await client.post(
            f"/api/suggestions/{suggestion_id}/vote", json={"voter_email": "late@example.com"}
        )
        assert response.status_code == 409

        # Publish
        response = await client.post(
            transition_url,
            json={"status": "published", "video_url": VIDEO_URL},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["allowed_transitions"] == []

        response = await client.get(f"/api/suggestions/{suggestion_id}")
        published = response.json()
        assert published["status"] == "published"
        assert published["status_label"] == "Published"
        assert published["video_url"] == VIDEO_URL
        assert published["embed_url"] == "https://www.youtube.com/embed/abc12345678"
        assert published["votes_count"] == 2

        # Published is terminal
        response = await client.post(transition_url, json={"status": "in_progress"}, headers=admin_headers)
        assert response.status_code == 409

        response = await client.get("/api/suggestions/", params={"status": "published"})
        assert [s["id"] for s in response.json()["suggestions"]] == [suggestion_id]
