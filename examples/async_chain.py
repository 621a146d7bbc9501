"""Asynchronous outcome chain example.

Runs the same combinators with coroutine steps. Each chain awaits one
step at a time; independent chains are gathered concurrently.

Usage:
    python examples/async_chain.py
"""

import asyncio

from src.outcomes import Outcome, ValueOutcome, to_outcome

FEEDS = {"news": ["a", "b", "c"], "sports": []}


async def fetch_feed(name: str) -> ValueOutcome[list[str]]:
    await asyncio.sleep(0.01)
    return to_outcome(FEEDS.get(name), f"feed {name!r} not found")


async def summarize(items: list[str]) -> str:
    await asyncio.sleep(0.01)
    return f"{len(items)} items" if items else "nothing new"


async def refresh(name: str) -> str:
    fetched = await Outcome.success().map_async(lambda: fetch_feed(name))
    summary = await fetched.map_async(summarize)
    return summary.match(
        lambda text: f"{name}: {text}",
        lambda diagnostic: f"{name}: skipped ({diagnostic})",
    )


async def main() -> None:
    names = ["news", "sports", "weather"]
    for line in await asyncio.gather(*(refresh(name) for name in names)):
        print(line)


if __name__ == "__main__":
    asyncio.run(main())
