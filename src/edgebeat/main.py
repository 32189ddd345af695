import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from textual.app import App
from textual.binding import Binding

from edgebeat.api import ClientConfig, RewardClient
from edgebeat.dashboard_screen import WalletDashboardScreen
from edgebeat.loader import WalletSourceError, load_wallets
from edgebeat.models import AppState
from edgebeat.settings import Settings, SettingsError, load_settings

logger = logging.getLogger(__name__)


class EdgeBeatApp(App):
    TITLE = "LayerEdge Heartbeat"
    CSS_PATH = str(Path(__file__).with_name("dashboard.tcss"))
    BINDINGS = [
        ("q", "quit", "Quit the app"),
        Binding("ctrl+c", "quit", "Quit the app", priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        settings: Settings,
        wallets: list[str],
        client: Optional[RewardClient] = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.app_state = AppState.from_wallets(wallets)
        self.dashboard: Optional[WalletDashboardScreen] = None
        self.client = client or RewardClient(
            ClientConfig(base_url=settings.api_base_url, timeout=settings.api_timeout)
        )

    def on_mount(self) -> None:
        self.dashboard = WalletDashboardScreen(
            self.app_state,
            self.client,
            interval=self.settings.ping_interval,
            page_size=self.settings.page_size,
        )
        self.push_screen(self.dashboard)

    async def action_quit(self) -> None:
        """Stop heartbeats before the app exits; in-flight requests are dropped."""
        if self.dashboard is not None:
            self.dashboard.shutdown()
        self.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edgebeat",
        description="Keep LayerEdge wallets checked in and show their points",
    )
    parser.add_argument("--wallets", dest="wallets_file", metavar="PATH", help="Wallet list, one address per line")
    parser.add_argument("--interval", dest="ping_interval", type=float, metavar="SECONDS", help="Seconds between heartbeats")
    parser.add_argument("--page-size", dest="page_size", type=int, metavar="N", help="Wallets per page")
    parser.add_argument("--api-url", dest="api_base_url", metavar="URL", help="Reward API base URL")
    parser.add_argument("--log-file", dest="log_file", metavar="PATH", help="Log file path")
    parser.add_argument("--log-level", dest="log_level", metavar="LEVEL", help="Logging level")
    parser.add_argument("--config", type=Path, metavar="PATH", help="JSON config file")
    return parser


def configure_logging(settings: Settings) -> None:
    # The terminal belongs to the dashboard, so logs go to a file.
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    console = Console(stderr=True)
    args = vars(build_parser().parse_args(argv))
    config_file = args.pop("config")

    try:
        settings = load_settings(config_file=config_file, overrides=args)
        configure_logging(settings)
        wallets = load_wallets(settings.wallets_file)
    except (SettingsError, WalletSourceError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        return 1

    app = EdgeBeatApp(settings, wallets)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Fatal error")
        console.print_exception()
        return 1
    finally:
        app.client.close()
    if app.return_code:
        return app.return_code
    console.print("[cyan]Shutting down...[/cyan]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
