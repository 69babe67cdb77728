"""Locust load testing script for MeetNotes."""

import random

from locust import HttpUser, between, task

SAMPLE_TRANSCRIPTS = [
    "Alice and Bob discussed Q3 goals. Alice will draft the roadmap by Friday.",
    "The team reviewed the incident from Tuesday. Root cause was an expired certificate.",
    "Marketing presented the launch plan. Budget approval is pending from finance.",
]

SAMPLE_PROMPTS = [
    "Summarize this text in bullet points.",
    "Summarize in one sentence.",
    "Highlight key decisions and action items.",
]


class MeetNotesUser(HttpUser):
    """Simulated user for load testing MeetNotes."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    def on_start(self) -> None:
        self.summary_ids: list[str] = []

    @task(4)
    def list_summaries(self) -> None:
        """Fetch summary history - most common operation."""
        response = self.client.get("/api/summaries")
        if response.ok:
            self.summary_ids = [s["_id"] for s in response.json()[:20]]

    @task(2)
    def load_index(self) -> None:
        """Render the single-page client."""
        self.client.get("/")

    @task(1)
    def summarize(self) -> None:
        """Generate a summary (calls the real provider)."""
        self.client.post(
            "/api/summarize",
            json={
                "transcript": random.choice(SAMPLE_TRANSCRIPTS),
                "prompt": random.choice(SAMPLE_PROMPTS),
            },
        )

    @task(1)
    def edit_summary(self) -> None:
        """Edit a random existing summary."""
        if not self.summary_ids:
            return
        summary_id = random.choice(self.summary_ids)
        self.client.put(
            f"/api/summaries/{summary_id}",
            json={"generatedSummary": "Edited during load test."},
            name="/api/summaries/[id]",
        )
