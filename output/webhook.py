"""
LEADSCOUT — Webhook Notifier
Sends alerts to Discord/Slack for hot leads and finished runs.
"""

import asyncio
import logging

import aiohttp

logger = logging.getLogger(__name__)

HOT_LEAD_SCORE = 80


class WebhookNotifier:
    """
    Sends formatted notifications via webhooks.
    Supports Discord and Slack webhook formats.
    """

    def __init__(self, webhook_url: str = "", platform: str = "discord"):
        """
        Args:
            webhook_url: Discord/Slack webhook URL
            platform: "discord" or "slack"
        """
        self.webhook_url = webhook_url
        self.platform = platform.lower()
        self.enabled = bool(webhook_url)
        self._sent_count = 0

    async def notify_hot_leads(self, records: list):
        """Send alert for leads scoring HOT_LEAD_SCORE or more."""
        if not self.enabled:
            return

        hot = [r for r in records if getattr(r, "lead_score", 0) >= HOT_LEAD_SCORE]
        if not hot:
            return

        if self.platform == "discord":
            await self._send_discord(hot)
        else:
            await self._send_slack(hot)

    async def notify_run_complete(self, summary):
        """Send found/target counters after a run, with any low-yield warning."""
        if not self.enabled:
            return

        warning = "; ".join(summary.warnings) if summary.warnings else ""
        if self.platform == "discord":
            fields = [
                {"name": "Found", "value": str(summary.found), "inline": True},
                {"name": "Target", "value": str(summary.target), "inline": True},
            ]
            if warning:
                fields.append({"name": "⚠️ Warning", "value": warning[:1024], "inline": False})
            payload = {
                "embeds": [{
                    "title": "🕷️ Run Complete",
                    "color": 0xFFAA00 if warning else 0x00FF88,
                    "fields": fields,
                    "footer": {"text": "LEADSCOUT"},
                }]
            }
        else:
            text = f"🕷️ *Run Complete* — {summary.found}/{summary.target} records"
            if warning:
                text += f"\n⚠️ {warning}"
            payload = {"text": text}

        await self._post(payload)

    @staticmethod
    def _describe(record) -> str:
        contact = record.email or record.phone or "no contact"
        who = record.decision_maker_name or "unknown decision maker"
        return (
            f"🌐 {record.website_url}\n"
            f"📧 {contact} | 👤 {who}\n"
            f"🏷️ {record.industry or 'N/A'} | Site: {record.website_quality_rating or 'N/A'}\n"
            f"Score: **{record.lead_score}**"
        )

    async def _send_discord(self, records: list):
        """Format and send leads as Discord embeds, five per message."""
        for i in range(0, len(records), 5):
            batch = records[i:i + 5]
            fields = [
                {
                    "name": f"🔴 {r.company_name or r.website_url}",
                    "value": self._describe(r)[:1024],  # Discord field value limit
                    "inline": False,
                }
                for r in batch
            ]
            payload = {
                "embeds": [{
                    "title": f"🔥 {len(batch)} Hot Lead{'s' if len(batch) > 1 else ''} Found!",
                    "color": 0xFF4444,
                    "fields": fields,
                    "footer": {"text": "LEADSCOUT"},
                }]
            }
            await self._post(payload)

    async def _send_slack(self, records: list):
        """Format and send leads as a Slack message."""
        blocks = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": f"🔥 {len(records)} Hot Leads Found!"},
            }
        ]
        for r in records[:10]:  # Limit to 10 per message
            blocks.append({
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": f"*🔴 {r.company_name or r.website_url}*\n{self._describe(r)}",
                },
            })
        await self._post({"blocks": blocks})

    async def _post(self, payload: dict):
        """Send webhook POST request."""
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                ) as resp:
                    if resp.status in (200, 204):
                        self._sent_count += 1
                    else:
                        logger.warning(f"  ⚠️  Webhook returned status {resp.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"  ⚠️  Webhook error: {e}")

    @property
    def stats(self) -> dict:
        return {
            "enabled": self.enabled,
            "platform": self.platform,
            "notifications_sent": self._sent_count,
        }
