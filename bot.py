import os

import discord
from discord.ext import commands

import config
import core_bot

os.environ["DISCORD_NO_AUDIO"] = "1"

intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(command_prefix=config.COMMAND_PREFIX, intents=intents)

core_bot.setup(bot)


@bot.event
async def on_ready():
    print(f"✅ Logged in as {bot.user} (id: {bot.user.id})")
    if config.CORE_CHANNEL_IDS:
        print(f"📌 !core limited to {len(config.CORE_CHANNEL_IDS)} channel(s)")


# === Run bot ===
if __name__ == "__main__":
    token = os.getenv(config.TOKEN_ENV_VAR)
    if not token:
        raise SystemExit(f"Environment variable {config.TOKEN_ENV_VAR} is missing.")
    bot.run(token)
