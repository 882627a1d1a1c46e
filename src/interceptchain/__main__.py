"""
=============================================================================
INTERCEPTOR CHAIN CLI ENTRY POINT
=============================================================================

Runs one call through the canonical chain and prints the response body.

=============================================================================
USAGE
=============================================================================

    # Fetch the user
    python -m interceptchain GET_USER

    # Pick a random known request body
    python -m interceptchain --random

    # Simulate a slow server
    python -m interceptchain POST_USER --latency 1.5

    # Watch the chain mechanics
    python -m interceptchain GET_USER --log-level DEBUG

=============================================================================
"""

import argparse
import logging
import random
import sys

from . import __version__
from .call import Request, Response
from .config import ChainConfig, LOG_LEVELS
from .errors import InterceptorError
from .interceptors import (
    InterceptorChain,
    ServerCallInterceptor,
    authorization_header,
    decode_response_body,
    encode_request_body,
    logging_interceptor,
)
from .server import RequestBody, WebApiServer


def setup_logging(config: ChainConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("interceptchain").setLevel(level)


def build_chain(request: Request, config: ChainConfig) -> InterceptorChain:
    """
    Build the canonical chain for one call.

    Order matters: requestward interceptors first, the decode interceptor
    before the terminal server call so it sees the response.
    """
    chain = InterceptorChain(request)

    if config.log_interceptor:
        chain.add_interceptor(logging_interceptor)

    return (chain
        .add_interceptor(encode_request_body)
        .add_interceptor(authorization_header)
        .add_interceptor(decode_response_body)
        .add_interceptor(
            ServerCallInterceptor(WebApiServer(latency=config.server_latency))
        ))


def run_call(body: str, config: ChainConfig) -> Response:
    """Run a single call through a freshly built chain."""
    return build_chain(Request(body), config).proceed()


def main(argv=None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code (0 on success, 1 on a failed call or bad config)
    """
    parser = argparse.ArgumentParser(
        prog="interceptchain",
        description="Send a request through an interceptor chain to a mock server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m interceptchain GET_USER              # Known request
  python -m interceptchain --random              # Random known request
  python -m interceptchain POST_USER --latency 1 # Slow server
        """
    )

    parser.add_argument(
        "body",
        nargs="?",
        default=None,
        help="Request body to send (e.g. GET_USER, POST_USER)"
    )

    parser.add_argument(
        "--random", "-r",
        action="store_true",
        help="Send a random known request body"
    )

    # Defaults come from the environment; flags override them
    env_config = ChainConfig.from_env()

    parser.add_argument(
        "--latency",
        type=float,
        default=env_config.server_latency,
        help="Simulated server latency in seconds (default: 0)"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=list(LOG_LEVELS),
        default=env_config.log_level.upper(),
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--no-logging",
        action="store_true",
        help="Leave the logging interceptor out of the chain"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"interceptchain {__version__}"
    )

    args = parser.parse_args(argv)

    if args.random:
        body = random.choice(list(RequestBody)).name
    elif args.body is not None:
        body = args.body
    else:
        parser.error("a request body or --random is required")

    config = ChainConfig(
        log_level=args.log_level,
        server_latency=args.latency,
        log_interceptor=env_config.log_interceptor and not args.no_logging,
    )

    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config)

    try:
        response = run_call(body, config)
    except InterceptorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(response.body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
