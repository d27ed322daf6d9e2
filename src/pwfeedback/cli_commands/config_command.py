"""Configuration CLI command."""

import typer

from .deps import cli_module
from .shared import app, console


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show, init"),
) -> None:
    """Show or initialize pwfeedback configuration."""
    cli = cli_module()

    if action == "init":
        config_path = cli.create_global_config()
        console.print(f"[green]Global config:[/green] {config_path}")
        console.print("[dim]Edit the file and uncomment the settings you want to change.[/dim]")
        return

    if action == "show":
        console.print("[bold]Effective settings:[/bold]")
        for key in cli.ENV_KEYS:
            value = cli.get_config(key)
            display = value if value not in (None, "") else "[dim]unset[/dim]"
            console.print(f"  {key}={display}")

        config_path = cli.get_global_config_path()
        config_data = cli.load_global_config()
        if not config_data:
            console.print(f"[dim]No global config at {config_path}. Run 'pwfeedback config init'.[/dim]")
            return

        import yaml

        console.print(f"[bold]Global Configuration ({config_path}):[/bold]")
        console.print(yaml.dump(config_data, default_flow_style=False))
        return

    console.print(f"[red]Unknown action: {action}. Use 'show' or 'init'.[/red]")
    raise typer.Exit(1)
