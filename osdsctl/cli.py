import typer
import logging
import sys
import traceback
from typing import Optional
from osdsctl.commands import volume
from osdsctl.logging import setup_logging

app = typer.Typer(help="OpenSDS command line client.", no_args_is_help=True)

# Global debug flag
debug_mode = False

# Add all command groups
app.add_typer(volume.app, name="volume")

# Global options callback
@app.callback()
def main_callback(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="Control plane URL (default: $OPENSDS_ENDPOINT)"),
    tenant: Optional[str] = typer.Option(None, "--tenant", help="Tenant id (default: $OPENSDS_TENANT_ID)"),
    auth_token: Optional[str] = typer.Option(None, "--auth-token", help="Auth token (default: $OPENSDS_AUTH_TOKEN)"),
):
    """OSDSCTL - storage volume management CLI."""
    global debug_mode
    debug_mode = debug
    setup_logging(debug)
    if debug:
        logging.debug("Debug mode enabled")
    obj = ctx.ensure_object(dict)
    obj["overrides"] = {
        "endpoint": endpoint,
        "tenant_id": tenant,
        "auth_token": auth_token,
    }


def main():
    """Console entry point."""
    try:
        app()
    except Exception as e:
        if debug_mode:
            logging.error(f"Unhandled exception: {e}\n{traceback.format_exc()}")
        else:
            logging.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
