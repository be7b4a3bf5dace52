from discord.ext import commands

import config
from core_solver import solve_core, split_number
from parser import FOUR_NUMBERS, ONE_NUMBER, WORD, classify_input, word_to_numbers

USAGE = (
    "⚠️ Provide a 4-letter word, one number of 4 or more digits, "
    "or four numbers separated by commas.\n"
    "Example: `!core CORE`, `!core 86455` or `!core 8,6,45,5`"
)


def regional_indicator(word: str) -> str:
    return " ".join(f":regional_indicator_{ch}:" for ch in word.lower())


def format_core_reply(text: str) -> str:
    """Build the Discord reply for one !core request."""
    kind, value = classify_input(text)

    if kind == WORD:
        numbers = word_to_numbers(value)
        heading = f"{regional_indicator(value)} -> {numbers}"
    elif kind == ONE_NUMBER:
        try:
            numbers = split_number(value)
        except ValueError as e:
            return f"⚠️ {e}"
        heading = f"🔢 **{value}** splits into {numbers}"
    elif kind == FOUR_NUMBERS:
        numbers = value
        heading = f"🔢 {numbers}"
    else:
        return USAGE

    result = solve_core(numbers)
    if result["core"] is None:
        return f"{heading}\n❌ No valid cores possible."

    expr = result["results"][0][1]
    line = f"🎯 The core is **{result['core']}**: `{expr}`"
    if result["letter"]:
        line += f" -> {regional_indicator(result['letter'])}"
    return f"{heading}\n{line}"


def setup(bot: commands.Bot):
    @bot.command(name="core")
    async def core_command(ctx, *, input_text: str):
        """
        Finds the core of a word or numbers.
        Usage: !core <word> | !core <number> | !core <n1>,<n2>,<n3>,<n4>
        """
        if config.CORE_CHANNEL_IDS and ctx.channel.id not in config.CORE_CHANNEL_IDS:
            await ctx.send("⚠️ Cannot use this command here.")
            return

        try:
            reply = format_core_reply(input_text)
        except Exception as e:
            await ctx.send(f"⚠️ Could not solve core — `{e}`")
            return

        await ctx.send(reply)

    print("✅ core_bot.py loaded successfully.")
