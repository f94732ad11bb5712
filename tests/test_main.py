"""Tests for the process entry point."""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import httpx

from ladder_scanner import main as main_module
from ladder_scanner.parser.page_client import AsyncPolymarketPageClient


def test_run_scans_until_cancelled(make_page, ladder_payload, capsys) -> None:
    """Test run keeps scanning and shuts down cleanly when cancelled."""
    page = make_page(ladder_payload)
    clients: list[AsyncPolymarketPageClient] = []

    def make_client() -> AsyncPolymarketPageClient:
        client = AsyncPolymarketPageClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=page)))
        clients.append(client)
        return client

    async def go() -> None:
        task = asyncio.create_task(main_module.run(interval=0.01))
        await asyncio.sleep(0.1)
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    with patch("ladder_scanner.main.AsyncPolymarketPageClient", side_effect=make_client):
        asyncio.run(go())

    out = capsys.readouterr().out
    assert out.count("Market ID: m1") >= 2
    assert clients[0].client.is_closed


def test_main_handles_keyboard_interrupt(capsys) -> None:
    """Test Ctrl+C ends the process quietly."""

    def interrupt(coro: object) -> None:
        coro.close()
        raise KeyboardInterrupt

    with patch("ladder_scanner.main.asyncio.run", side_effect=interrupt):
        main_module.main()

    assert "Scanner stopped." in capsys.readouterr().out


def test_run_accepts_integer_interval(make_page, ladder_payload, capsys) -> None:
    """Test a whole-second interval is accepted."""
    page = make_page(ladder_payload)

    def make_client() -> AsyncPolymarketPageClient:
        return AsyncPolymarketPageClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=page)))

    async def go() -> None:
        task = asyncio.create_task(main_module.run(interval=60))
        await asyncio.sleep(0.05)
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    with patch("ladder_scanner.main.AsyncPolymarketPageClient", side_effect=make_client):
        asyncio.run(go())

    assert capsys.readouterr().out.count("Market ID: m1") == 1
