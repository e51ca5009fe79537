"""Expose the local Events API endpoint through an ngrok tunnel for development."""
import ngrok
import asyncio
import os
from dotenv import load_dotenv

load_dotenv()

async def start_tunnel():
    authtoken = os.getenv("NGROK_AUTHTOKEN")
    port = int(os.getenv("PORT", "3000"))

    print(f"Opening ngrok tunnel to localhost:{port}...")
    try:
        listener = await ngrok.forward(port, authtoken=authtoken)
    except Exception as e:
        print(f"[ERROR] Failed to start ngrok: {e}")
        print("Set NGROK_AUTHTOKEN in your .env file (https://dashboard.ngrok.com/get-started/your-authtoken).")
        return

    print("\n=== Development tunnel ===")
    print(f"Local:  http://localhost:{port}")
    print(f"Public: {listener.url()}")
    print(f"\nSet the Event Subscriptions Request URL to {listener.url()}/slack/events")
    print("Run `python -m slack_summary_bot.main_ingest` alongside this script. Ctrl+C to stop.\n")

    while True:
        await asyncio.sleep(3600)

if __name__ == "__main__":
    try:
        asyncio.run(start_tunnel())
    except KeyboardInterrupt:
        print("\nShutting down tunnel...")
