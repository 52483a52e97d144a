"""Element text, count and visibility helpers."""

import asyncio
import anyio


async def get_text(element) -> str:
    """Rendered text of an element."""
    return await anyio.to_thread.run_sync(lambda: element.text)


async def count_elements(parent, by: str, selector: str) -> int:
    """Number of elements below parent matching a locator."""
    elements = await anyio.to_thread.run_sync(
        lambda: parent.find_elements(by, selector)
    )
    return len(elements)


async def count_displayed(elements) -> int:
    """
    Count how many elements are displayed.

    Each element's is_displayed() is resolved in its own worker thread
    and all of them are awaited before counting. The first failure is
    raised as-is.

    Args:
        elements: WebElements to inspect

    Returns:
        Number of elements whose is_displayed() is true
    """
    flags = await asyncio.gather(
        *(anyio.to_thread.run_sync(element.is_displayed) for element in elements)
    )
    return sum(1 for displayed in flags if displayed)
