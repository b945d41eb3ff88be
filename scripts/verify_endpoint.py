#!/usr/bin/env python3
"""Live API verification script.

Usage: python scripts/verify_endpoint.py <path> [<path> ...]

Examples:
    python scripts/verify_endpoint.py movie popular
    python scripts/verify_endpoint.py tv top_rated

Reads MOVIEDB_API_KEY (and the other MOVIEDB_* settings) from the
environment or .env, fetches the first two pages of the collection and
checks that the second identical request is served from the cache.
"""

import asyncio
import sys

from rich.console import Console
from rich.table import Table

from moviedb import ApiDate, ApiModel, Client, InvalidURLError, Settings
from moviedb.logging_setup import configure_debug_logging, configure_logging

console = Console()


class Title(ApiModel):
    id: int
    title: str | None = None
    name: str | None = None
    release_date: ApiDate | None = None
    first_air_date: ApiDate | None = None


async def verify_endpoint(client: Client, path: list[str]) -> bool:
    display_path = "/".join(path)
    console.print(f"\n🔍 [bold cyan]Verifying endpoint: /{display_path}[/bold cyan]\n")

    # Step 1: First page
    console.print("[bold]Step 1: get_page()[/bold]")
    try:
        paging = await client.get_page(path, Title)
    except InvalidURLError as e:
        console.print(f"  [bold red]✗[/bold red] {e}")
        return False
    except Exception as e:
        console.print(f"  [bold red]✗[/bold red] get_page() failed: {e}")
        return False

    console.print(
        f"  [green]✓[/green] Page {paging.page.page}/{paging.page.total_pages}, "
        f"{len(paging.items)} items"
    )

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="yellow")
    table.add_column("Date", style="green")

    for item in paging.items[:5]:
        released = item.release_date or item.first_air_date
        table.add_row(str(item.id), item.title or item.name or "", str(released or "-"))

    if len(paging.items) > 5:
        table.add_row("...", "...", "...", style="dim")

    console.print(table)

    # Step 2: Next page
    console.print("\n[bold]Step 2: next()[/bold]")
    if not paging.has_next:
        console.print("  [yellow]⚠[/yellow] Single-page collection, skipping")
    else:
        try:
            second = await paging.next()
            console.print(
                f"  [green]✓[/green] Page {second.page.page} with {len(second.items)} items"
            )
        except Exception as e:
            console.print(f"  [bold red]✗[/bold red] next() failed: {e}")
            return False

    # Step 3: Cache
    console.print("\n[bold]Step 3: cache[/bold]")
    if client.cache is None:
        console.print("  [yellow]⚠[/yellow] Cache disabled (MOVIEDB_CACHE_ENABLED=false)")
    else:
        again = await client.get_page(path, Title)
        if again.items == paging.items:
            console.print("  [green]✓[/green] Repeated request served identical items")
        else:
            console.print("  [bold red]✗[/bold red] Repeated request returned different items")
            return False

    console.print(f"\n[bold green]✓ All checks passed for /{display_path}[/bold green]\n")
    return True


async def main() -> int:
    if len(sys.argv) < 2:
        console.print(
            "[bold red]Usage:[/bold red] python scripts/verify_endpoint.py <path> [<path> ...]"
        )
        console.print("\nExample: python scripts/verify_endpoint.py movie popular")
        return 1

    try:
        settings = Settings()  # pyright: ignore[reportCallIssue]
    except Exception as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return 1

    configure_logging()
    configure_debug_logging(settings.debug_modules)

    async with Client.from_settings(settings) as client:
        success = await verify_endpoint(client, sys.argv[1:])
    return 0 if success else 1


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
