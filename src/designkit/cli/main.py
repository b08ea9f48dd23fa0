"""
Main CLI module with argument parsing and command execution.

Each pattern has its own subcommand running a small demonstration; ``serve``
runs the front controller behind uvicorn.
"""
import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from designkit._version import __version__
from designkit.cli import demos
from designkit.cli.formatters import format_output
from designkit.domain.exceptions import DesignKitError, ValidationError
from designkit.infrastructure.logging.logger import get_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "designkit",
        description="designkit - design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s strategy --price 100 --rate 1.2 --swap-rate 1.0
  %(prog)s factory ship --destination Marseille
  %(prog)s decorator --channel sms --channel slack "Server is down"
  %(prog)s front-controller GET /pricing/standard/quote --query price=100
        """,
    )
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument("--format", choices=["json", "yaml", "table"], default="json", help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="pattern", help="Available patterns")
    subparsers.required = True

    singleton = subparsers.add_parser("singleton", help="Race threads for one shared instance")
    singleton.add_argument("--threads", type=int, default=8)

    factory = subparsers.add_parser("factory", help="Build a transport from its kind")
    factory.add_argument("kind")
    factory.add_argument("--destination", default="warehouse")

    adapter = subparsers.add_parser("adapter", help="Read a legacy source through the adapter")
    adapter.add_argument("--payload", default="Données dans ancien format")

    decorator = subparsers.add_parser("decorator", help="Send a message through a notifier chain")
    decorator.add_argument("message")
    decorator.add_argument("--channel", action="append", default=[], help="Decorator channel, innermost first")

    strategy = subparsers.add_parser("strategy", help="Compute a taxed total")
    strategy.add_argument("--price", type=float, required=True)
    strategy.add_argument("--rate", type=float, default=1.2)
    strategy.add_argument("--swap-rate", type=float)

    observer = subparsers.add_parser("observer", help="Notify observers in attachment order")
    observer.add_argument("event")
    observer.add_argument("--observer", action="append", default=[], help="Observer name")
    observer.add_argument("--failure-policy", choices=["continue", "fail_fast"], default="continue")

    command = subparsers.add_parser("command", help="Dispatch a welcome command through the bus")
    command.add_argument("--email", required=True)
    command.add_argument("--name", required=True)

    front = subparsers.add_parser("front-controller", help="Send one request through the front controller")
    front.add_argument("method")
    front.add_argument("path")
    front.add_argument("--query", action="append", default=[], help="key=value query parameter")
    front.add_argument("--body", help="JSON request body")

    serve = subparsers.add_parser("serve", help="Serve the front controller over HTTP")
    serve.add_argument("--host")
    serve.add_argument("--port", type=int)

    return parser.parse_args(argv)


def _parse_query(pairs: List[str]) -> Dict[str, str]:
    query = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator:
            raise DesignKitError(f"Query parameter must be key=value: {pair}")
        query[key] = value
    return query


def _parse_body(raw_body: Optional[str]) -> Any:
    if not raw_body:
        return None
    try:
        return json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON body: {e}") from e


def execute(args: argparse.Namespace) -> Any:
    """Run the selected pattern and return its data."""
    if args.pattern == "singleton":
        return demos.singleton_demo(args.threads)
    if args.pattern == "factory":
        return demos.factory_demo(args.kind, args.destination)
    if args.pattern == "adapter":
        return demos.adapter_demo(args.payload)
    if args.pattern == "decorator":
        return demos.decorator_demo(args.channel, args.message)
    if args.pattern == "strategy":
        return demos.strategy_demo(args.price, args.rate, args.swap_rate)
    if args.pattern == "observer":
        return demos.observer_demo(args.event, args.observer or ["A", "B", "C"], args.failure_policy)
    if args.pattern == "command":
        return demos.command_demo(args.email, args.name)
    if args.pattern == "front-controller":
        from designkit.bootstrap import Application

        body = _parse_body(args.body)
        app = Application(args.config).initialize()
        exchange = app.front_controller.process(args.method, args.path, query=_parse_query(args.query), body=body)
        return {
            "status_code": exchange.response.status_code,
            "body": exchange.response.body,
            "lifecycle": [state.value for state in exchange.lifecycle.history],
        }
    raise DesignKitError(f"Unknown pattern: {args.pattern}")


def serve(args: argparse.Namespace) -> None:
    """Run the HTTP server."""
    import uvicorn

    from designkit.bootstrap import Application

    app = Application(args.config).initialize()
    server_config = app.config.server
    uvicorn.run(
        app.create_http_app(),
        host=args.host or server_config.host,
        port=args.port or server_config.port,
        log_level=server_config.log_level,
        access_log=server_config.access_log,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    if args.pattern == "serve":
        serve(args)
        return 0

    try:
        result = execute(args)
    except (DesignKitError, PydanticValidationError) as e:
        logger.error("Command failed", pattern=args.pattern, error=str(e))
        print(format_output({"success": False, "error": str(e)}, args.format), file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
