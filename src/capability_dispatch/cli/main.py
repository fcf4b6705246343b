"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the application factory and client
"""
import argparse
import json
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from capability_dispatch._package import PACKAGE_NAME_SHORT
from capability_dispatch._version import __version__
from capability_dispatch.cli.formatters import format_output
from capability_dispatch.domain.base.exceptions import ConfigurationError, DomainException
from capability_dispatch.infrastructure.logging.logger import get_logger

SENSITIVE_MARKERS = ("key", "secret", "token", "password")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the resource-action structure."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or PACKAGE_NAME_SHORT,
        description="Capability dispatch - build variants by discriminator and operate them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s variants list                                  # List registered variants
  %(prog)s variants run bicycle                           # Pedal once and report the rate
  %(prog)s variants run car --config-json '{"apiKey": "k1"}'
  %(prog)s variants verify --format table                 # Check all variants are substitutable
  %(prog)s config show --format yaml
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table', 'list'],
                        default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Variants resource
    variants_parser = subparsers.add_parser('variants', help='Build and operate variants')
    variants_subparsers = variants_parser.add_subparsers(dest='action', help='Variant actions')

    variants_subparsers.add_parser('list', help='List registered variants')

    variants_run = variants_subparsers.add_parser('run', help='Run the primary action and report the rate')
    variants_run.add_argument('discriminator', help='Variant to build')
    variants_run.add_argument('--config-json', help='Configuration bundle as a JSON object')
    variants_run.add_argument('--cached', action='store_true', default=None,
                              help='Reuse a shared instance for this discriminator and bundle')

    variants_rate = variants_subparsers.add_parser('rate', help='Report the rate only')
    variants_rate.add_argument('discriminator', help='Variant to build')
    variants_rate.add_argument('--config-json', help='Configuration bundle as a JSON object')

    variants_subparsers.add_parser('verify', help='Check that all registered variants are substitutable')

    # Config resource
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Configuration actions')

    config_subparsers.add_parser('show', help='Show the effective configuration')
    config_validate = config_subparsers.add_parser('validate', help='Validate configuration')
    config_validate.add_argument('--file', help='Configuration file to validate')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _parse_bundle(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    if raw is None:
        return None
    try:
        bundle = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"--config-json is not valid JSON: {e}") from e
    if not isinstance(bundle, dict):
        raise ConfigurationError("--config-json must be a JSON object")
    return bundle


def _mask_secrets(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key: "********" if any(m in key.lower() for m in SENSITIVE_MARKERS) and isinstance(value, str)
            else _mask_secrets(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_mask_secrets(item) for item in data]
    return data


def handle_variants_list(args, app) -> Dict[str, Any]:
    return {
        "variants": [
            {"discriminator": key, "description": description}
            for key, description in app.registry.describe_variants().items()
        ]
    }


def handle_variants_run(args, app) -> Dict[str, Any]:
    bundle = _parse_bundle(args.config_json)
    use_cache = app.cache_instances if args.cached is None else args.cached
    if use_cache:
        capability = app.factory.get_or_create(args.discriminator, bundle)
    else:
        capability = app.factory.create(args.discriminator, bundle)
    return app.client.operate(capability, label=args.discriminator).model_dump()


def handle_variants_rate(args, app) -> Dict[str, Any]:
    capability = app.factory.create(args.discriminator, _parse_bundle(args.config_json))
    return {"label": args.discriminator, "rate": app.client.current_rate(capability)}


def handle_variants_verify(args, app) -> Dict[str, Any]:
    result = app.checker.check_registered(app.factory)
    return {"consistent": result.consistent, **result.model_dump()}


def handle_config_show(args, app) -> Dict[str, Any]:
    return _mask_secrets(app.config_manager.app_config.model_dump(mode="json"))


def handle_config_validate(args, app) -> Dict[str, Any]:
    from capability_dispatch.config.manager import ConfigurationManager

    config_file = args.file or args.config
    app_config = ConfigurationManager(config_file).app_config
    return {"valid": True, "file": config_file, "environment": app_config.environment}


COMMAND_HANDLERS: Dict[tuple, Callable[..., Dict[str, Any]]] = {
    ('variants', 'list'): handle_variants_list,
    ('variants', 'run'): handle_variants_run,
    ('variants', 'rate'): handle_variants_rate,
    ('variants', 'verify'): handle_variants_verify,
    ('config', 'show'): handle_config_show,
    ('config', 'validate'): handle_config_validate,
}


def execute_command(args, app) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)

    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return COMMAND_HANDLERS[handler_key](args, app)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        # Initialize application
        try:
            from capability_dispatch.bootstrap import create_application
            app = create_application(args.config)
        except Exception as e:
            logger.error(f"Failed to initialize application: {e}")
            if args.verbose:
                import traceback
                traceback.print_exc()
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        if args.log_level:
            logging.getLogger().setLevel(getattr(logging, args.log_level))

        # Execute command
        try:
            result = execute_command(args, app)

            formatted_output = format_output(result, args.format)

            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output)
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

            if result.get("consistent") is False:
                sys.exit(1)

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                import traceback
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
