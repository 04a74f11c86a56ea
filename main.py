"""
Entrypoint: load config, init logging, wire the catalog service to its
remote object service and print the requested catalog object.
"""

import argparse
import json
import sys

import httpx
import structlog
from dotenv import load_dotenv

from catalogclient.config import Config
from catalogclient.errors import CatalogClientError, ConfigError
from catalogclient.logs import configure_logging
from catalogclient.remote import RemoteObjectService
from catalogclient.service import CatalogObjectService


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Fetch objects from the catalog service")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--catalog-url", default=None, help="Catalog URL, overrides the configuration")
    parser.add_argument("--session-id", default=None, help="Session id, overrides the configuration")
    parser.add_argument("action", choices=["metadata", "raw", "resolved"])
    parser.add_argument("bucket_id", type=int)
    parser.add_argument("name")
    parser.add_argument("--no-resolve", action="store_true",
                        help="With 'resolved', return the content without resolving links")
    args = parser.parse_args(argv)
    if args.no_resolve and args.action != "resolved":
        parser.error("--no-resolve only applies to the 'resolved' action")
    return args


def run(args, config: Config, remote: RemoteObjectService) -> str:
    """Execute the requested action and return the text to print."""
    catalog_url = args.catalog_url or config.catalog.get('url')
    session_id = args.session_id or config.catalog.get('session_id')
    if not catalog_url:
        raise ConfigError("catalog.url is not configured and --catalog-url was not given")

    service = CatalogObjectService(remote=remote,
                                   max_substitutions=config.resolver.get('max_substitutions'))

    if args.action == "metadata":
        catalog_object = service.get_catalog_object_metadata(catalog_url, args.bucket_id, args.name, session_id)
        return json.dumps(catalog_object.model_dump(), indent=2)
    if args.action == "raw":
        return service.get_raw_catalog_object(catalog_url, args.bucket_id, args.name, session_id)
    return service.get_resolved_catalog_object(catalog_url, args.bucket_id, args.name,
                                               not args.no_resolve, session_id)


def main(argv=None) -> int:
    """Initialize dependencies and fetch the catalog object"""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = Config(args.config)
    except CatalogClientError as e:
        print(f"Fatal error during startup: {e}", file=sys.stderr)
        return 1

    configure_logging(level=config.logging.get('level', 'INFO'),
                      renderer=config.logging.get('renderer', 'json'))
    logger = structlog.get_logger(__name__)

    try:
        with RemoteObjectService.from_config(config.fetcher) as remote:
            output = run(args, config, remote)
    except (httpx.HTTPError, CatalogClientError, ValueError) as e:
        logger.error("catalog_request_failed",
                     action=args.action,
                     bucket_id=args.bucket_id,
                     name=args.name,
                     error=str(e),
                     exc_info=True)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
