"""i3 command strings sent in response to pad presses.

Values are substituted literally; workspace names are not escaped.
"""


def focus_command(con_id: int) -> str:
    """Focus the container with the given id."""
    return f'[con_id="{con_id}"] focus'


def workspace_command(name: str) -> str:
    """Switch to the named workspace."""
    return f"workspace {name}"
