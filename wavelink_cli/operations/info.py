"""Application info command."""

from wavelink_cli.client import WaveLinkApi
from wavelink_cli.output import OutputHandler


async def show_application_info(client: WaveLinkApi, console: OutputHandler) -> None:
    info = await client.get_application_info()
    console.print("\n=== Wave Link Application Info ===\n")
    console.print(f"Application ID: {info.app_id}")
    console.print(f"Name: {info.name}")
    console.print(f"Interface Revision: {info.interface_revision}")
    console.print()
