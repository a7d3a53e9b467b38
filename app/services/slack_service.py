import logging
from datetime import datetime
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from app.config import config
from app.schemas.sync import SyncReport

logger = logging.getLogger(__name__)

MAX_LISTED_ERRORS = 5


class SlackService:
    def __init__(self):
        self.token = config.SLACK_BOT_TOKEN
        self.status_channel = config.SLACK_CHANNEL_JOB_STATUS
        self.client = WebClient(token=self.token) if self.token else None

        # Format mentions: <@U123>, <@U456>
        raw_mentions = config.SLACK_MENTIONS or ""
        self.mentions = " ".join([f"<@{m.strip()}>" for m in raw_mentions.split(",") if m.strip()])

        if not self.token:
            logger.warning("SLACK_BOT_TOKEN not provided. Slack notifications will be disabled.")

    def _get_timestamp_block(self):
        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return {
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": f"🕒 *Local Time:* {now}"}]
        }

    def build_sync_blocks(self, report: SyncReport, triggered_by: str) -> list:
        title = "✅ MainStreet Sync Completed" if report.success else "❌ MainStreet Sync Failed"
        blocks = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": title, "emoji": True}
            }
        ]

        if report.success:
            blocks.append({
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Synced:* {report.synced}/{report.total}"},
                    {"type": "mrkdwn", "text": f"*Discarded rows:* {report.discarded or 0}"},
                    {"type": "mrkdwn", "text": f"*Triggered by:* {triggered_by}"},
                ]
            })
        else:
            blocks.append({
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"*Triggered by:* {triggered_by}\n*Error:* {report.error}"}
            })

        errors = report.errors or []
        if errors:
            listed = "\n".join(f"• {e}" for e in errors[:MAX_LISTED_ERRORS])
            if len(errors) > MAX_LISTED_ERRORS:
                listed += f"\n_And {len(errors) - MAX_LISTED_ERRORS} more..._"
            blocks.append({"type": "divider"})
            blocks.append({
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"⚠️ *Record errors*\n{listed}"}
            })

        if (not report.success or errors) and self.mentions:
            blocks.append({
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"🚨 Attention: {self.mentions}"}
            })

        blocks.append(self._get_timestamp_block())
        return blocks

    def send_sync_report(self, report: SyncReport, triggered_by: str):
        """
        Posts the outcome of a MainStreet sync to the status channel.
        """
        fallback = f"MainStreet sync {'completed' if report.success else 'failed'}"
        return self._send_blocks(self.status_channel, self.build_sync_blocks(report, triggered_by), fallback)

    def _send_blocks(self, channel: str, blocks: list, fallback_text: str):
        if not self.client or not channel:
            return None

        try:
            response = self.client.chat_postMessage(
                channel=channel,
                blocks=blocks,
                text=fallback_text
            )
            logger.info(f"Slack blocks sent successfully to {channel}")
            return response
        except SlackApiError as e:
            logger.error(f"Error sending Slack blocks to {channel}: {e.response['error']}")
            return None

slack_service = SlackService()
