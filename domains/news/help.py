"""Help menu text for the bot's commands."""

from typing import Iterable, Optional

from .config import HELP_FOOTER


def build_help_text(commands: Iterable, command_name: Optional[str] = None) -> str:
    """Format the help menu.

    Args:
        commands: Registered commands (anything with `name` and `description`)
        command_name: Show only this command, if given

    Returns:
        Help text, always ending with the bot description footer
    """
    commands = sorted((c for c in commands if not getattr(c, "hidden", False)), key=lambda c: c.name)

    if command_name:
        wanted = command_name.strip().lstrip("/~").lower()
        match = next((c for c in commands if c.name == wanted), None)
        if match is None:
            body = f"No command called `{wanted}` found."
        else:
            body = f"**/{match.name}**\n{match.description or 'No description.'}"
    else:
        lines = ["**Commands:**"]
        for command in commands:
            lines.append(f"`/{command.name}` - {command.description or 'No description.'}")
        body = "\n".join(lines)

    return f"{body}\n\n{HELP_FOOTER}"


def matching_command_names(commands: Iterable, current: str, limit: int = 25) -> list[str]:
    """Command names starting with the partially typed `current`, for autocomplete."""
    current = current.lower()
    names = sorted(c.name for c in commands if not getattr(c, "hidden", False))
    return [name for name in names if name.startswith(current)][:limit]
