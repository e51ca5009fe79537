#!/usr/bin/env python3
"""
Quick check that the environment is configured for the Slack Summary Bot.
Reports which variables are set for Socket Mode and for the Events API endpoint.
"""
from dotenv import load_dotenv
import os

load_dotenv()

COMMON = {
    "SLACK_BOT_TOKEN": "Bot User OAuth Token (xoxb-...)",
    "OPENAI_API_KEY": "OpenAI API key (sk-...)",
}
MODES = {
    "Socket Mode": {"SLACK_APP_TOKEN": "App-Level Token (xapp-...)"},
    "Events API": {"SLACK_SIGNING_SECRET": "Signing Secret from Basic Information"},
}

def _mask(var: str, value: str) -> str:
    if "TOKEN" in var or "KEY" in var or "SECRET" in var:
        return value[:8] + "..." if len(value) > 8 else "***"
    return value

def _report(required: dict) -> bool:
    ok = True
    for var, description in required.items():
        value = os.getenv(var)
        if value:
            print(f"✓ {var}: {_mask(var, value)}")
        else:
            print(f"✗ {var}: NOT SET ({description})")
            ok = False
    return ok

def check_env():
    print("=" * 60)
    print("Slack Summary Bot configuration check")
    print("=" * 60)

    common_ok = _report(COMMON)
    ready = []
    for mode, required in MODES.items():
        print(f"\n[{mode}]")
        if _report(required) and common_ok:
            ready.append(mode)

    print("=" * 60)
    if not ready:
        print("\n✗ Not ready to run. Add the missing variables to your .env file.")
        return

    print(f"\n✓ Ready for: {', '.join(ready)}")
    if "Socket Mode" in ready:
        print("   python -m slack_summary_bot.main_socket")
    if "Events API" in ready:
        print("   python -m slack_summary_bot.main_ingest")
    print("\nThen mention the bot with a link in any channel it has joined.")

if __name__ == "__main__":
    check_env()
