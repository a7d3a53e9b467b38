"""Tests for the sync notification blocks."""

from app.schemas.sync import SyncReport
from app.services.slack_service import SlackService


def block_texts(blocks):
    texts = []
    for block in blocks:
        if "text" in block:
            texts.append(block["text"]["text"])
        texts.extend(f["text"] for f in block.get("fields", []))
    return texts


class TestSyncBlocks:

    def test_disabled_without_token(self):
        service = SlackService()
        assert service.client is None
        assert service.send_sync_report(SyncReport(success=True, synced=1, total=1), "admin") is None

    def test_success_summary(self):
        report = SyncReport(success=True, synced=2, total=3, discarded=1, errors=["Failed to sync cls-9: boom"])
        texts = block_texts(SlackService().build_sync_blocks(report, "admin"))
        assert texts[0] == "✅ MainStreet Sync Completed"
        assert "*Synced:* 2/3" in texts
        assert any("Failed to sync cls-9: boom" in t for t in texts)

    def test_error_list_is_capped(self):
        errors = [f"Failed to sync cls-{i}: boom" for i in range(8)]
        texts = block_texts(SlackService().build_sync_blocks(SyncReport(success=True, synced=0, total=8, errors=errors), "admin"))
        listed = next(t for t in texts if t.startswith("⚠️"))
        assert "cls-4" in listed
        assert "cls-5" not in listed
        assert "And 3 more" in listed

    def test_failure_mentions(self):
        service = SlackService()
        service.mentions = "<@U123>"
        texts = block_texts(service.build_sync_blocks(SyncReport(success=False, error="Sync failed: timeout"), "admin"))
        assert texts[0] == "❌ MainStreet Sync Failed"
        assert any("Sync failed: timeout" in t for t in texts)
        assert any("<@U123>" in t for t in texts)
