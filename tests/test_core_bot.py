"""Tests for the !core Discord command."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
from discord.ext import commands

import config
import core_bot
from core_bot import USAGE, format_core_reply


@pytest.fixture
def bot():
    intents = discord.Intents.default()
    intents.message_content = True
    bot = commands.Bot(command_prefix="!", intents=intents)
    core_bot.setup(bot)
    return bot


@pytest.fixture
def ctx():
    ctx = MagicMock()
    ctx.send = AsyncMock()
    ctx.channel.id = 1234
    return ctx


def test_reply_for_word():
    assert format_core_reply("hand") == (
        ":regional_indicator_h: :regional_indicator_a: :regional_indicator_n: "
        ":regional_indicator_d: -> [8, 1, 14, 4]\n"
        "🎯 The core is **2**: `((8 - 1) × 4) / 14` -> :regional_indicator_b:"
    )


def test_reply_for_single_number():
    assert format_core_reply("86455") == (
        "🔢 **86455** splits into [8, 6, 45, 5]\n"
        "🎯 The core is **18**: `((8 - 6) × 45) / 5` -> :regional_indicator_r:"
    )


def test_reply_for_four_numbers_without_letter():
    assert format_core_reply("1000,200,11,2") == (
        "🔢 [1000, 200, 11, 2]\n"
        "🎯 The core is **53**: `((1000 × 11) / 200) - 2`"
    )


def test_reply_without_core():
    reply = format_core_reply("CORE")
    assert reply.endswith("\n❌ No valid cores possible.")


def test_reply_for_short_number():
    assert format_core_reply("999") == "⚠️ Number must have at least 4 digits to split into four."


def test_reply_for_unknown_input():
    assert format_core_reply("what is this") == USAGE


def test_setup_registers_command(bot):
    assert bot.get_command("core") is not None


@pytest.mark.asyncio
async def test_core_command_sends_reply(bot, ctx, monkeypatch):
    monkeypatch.setattr(config, "CORE_CHANNEL_IDS", set())
    command = bot.get_command("core")

    await command.callback(ctx, input_text="8,6,45,5")

    ctx.send.assert_awaited_once()
    assert "**18**" in ctx.send.await_args.args[0]


@pytest.mark.asyncio
async def test_core_command_respects_channel_list(bot, ctx, monkeypatch):
    monkeypatch.setattr(config, "CORE_CHANNEL_IDS", {99})
    command = bot.get_command("core")

    await command.callback(ctx, input_text="86455")

    ctx.send.assert_awaited_once_with("⚠️ Cannot use this command here.")


@pytest.mark.asyncio
async def test_core_command_reports_unexpected_errors(bot, ctx, monkeypatch):
    monkeypatch.setattr(config, "CORE_CHANNEL_IDS", set())

    def boom(text):
        raise RuntimeError("boom")

    monkeypatch.setattr(core_bot, "format_core_reply", boom)
    command = bot.get_command("core")

    await command.callback(ctx, input_text="86455")

    ctx.send.assert_awaited_once_with("⚠️ Could not solve core — `boom`")
