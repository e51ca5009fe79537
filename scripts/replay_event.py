"""
Send a signed app_mention event to a locally running Events API endpoint.

Usage:
    python scripts/replay_event.py --channel C12345 "Please summarize https://example.com/post"
"""
import argparse
import asyncio
import json
import time
import httpx
from slack_sdk.signature import SignatureVerifier
from slack_summary_bot.config import get_settings

def build_mention_payload(channel: str, text: str, bot_user_id: str) -> dict:
    ts = f"{time.time():.6f}"
    return {
        "type": "event_callback",
        "event_id": f"EvReplay{int(time.time())}",
        "event": {
            "type": "app_mention",
            "channel": channel,
            "user": "UREPLAY",
            "text": f"<@{bot_user_id}> {text}",
            "ts": ts,
            "event_ts": ts,
        },
    }

async def send_event(url: str, payload: dict):
    settings = get_settings()
    body = json.dumps(payload)
    timestamp = str(int(time.time()))
    signature = SignatureVerifier(settings.SLACK_SIGNING_SECRET).generate_signature(
        timestamp=timestamp, body=body
    )
    headers = {
        "Content-Type": "application/json",
        "X-Slack-Request-Timestamp": timestamp,
        "X-Slack-Signature": signature,
    }

    async with httpx.AsyncClient() as client:
        print(f"Sending app_mention to {url}...")
        resp = await client.post(url, content=body, headers=headers)
        print(f"Status: {resp.status_code}")
        print(f"Response: {resp.text}")

def main():
    p = argparse.ArgumentParser(description="Replay an app_mention event against the local endpoint")
    p.add_argument("text", help="Message text after the bot mention")
    p.add_argument("--channel", required=True, help="Channel ID replies are posted to")
    p.add_argument("--bot-user-id", default="UBOT", help="User ID used in the mention token")
    p.add_argument("--url", default="http://localhost:3000/slack/events")
    args = p.parse_args()

    asyncio.run(send_event(args.url, build_mention_payload(args.channel, args.text, args.bot_user_id)))

if __name__ == "__main__":
    main()
