import os

# === Bot configuration ===
COMMAND_PREFIX = os.getenv("CORE_COMMAND_PREFIX", "!")
TOKEN_ENV_VAR = "DISCORD_BOT_TOKEN"


def parse_channel_ids(raw: str) -> set[int]:
    """Comma-separated channel IDs; empty entries are ignored."""
    try:
        return {int(cid) for cid in raw.split(",") if cid.strip()}
    except ValueError:
        raise SystemExit(f"CORE_CHANNEL_IDS must be comma-separated channel IDs, got {raw!r}.")


# Channels where !core answers; empty means every channel
CORE_CHANNEL_IDS = parse_channel_ids(os.getenv("CORE_CHANNEL_IDS", ""))
