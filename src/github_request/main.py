"""主入口"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

import yaml

from github_request.config.settings import Config
from github_request.core.exceptions import RequestClientError
from github_request.services.request_client import SUPPORTED_METHODS, RequestClient
from github_request.utils.logging_config import setup_logging


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a request to the GitHub API")
    parser.add_argument(
        "path",
        help="API path (e.g. /repos/octocat/hello-world) or absolute URL",
    )
    parser.add_argument(
        "-X",
        "--method",
        default="GET",
        type=str.upper,
        choices=SUPPORTED_METHODS,
        help="HTTP method",
    )
    parser.add_argument(
        "-d",
        "--data",
        help="JSON request body",
    )
    parser.add_argument(
        "--extended",
        action="store_true",
        help="Print status code and headers alongside the body",
    )
    parser.add_argument(
        "--format",
        choices=("json", "yaml"),
        default="json",
        help="Output format",
    )
    return parser.parse_args(argv)


def render(data: Any, output_format: str) -> str:
    """格式化输出"""
    if output_format == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    return json.dumps(data, indent=2, ensure_ascii=False)


def main(
    argv: Optional[list[str]] = None, client: Optional[RequestClient] = None
) -> int:
    """主入口函数"""
    args = parse_args(argv)

    config = Config()
    setup_logging(level=config.app.log_level)

    try:
        body = json.loads(args.data) if args.data else None
    except json.JSONDecodeError as e:
        logging.error(f"Invalid JSON body: {e}")
        return 2

    client = client or RequestClient(config.github)

    try:
        if args.extended:
            output = client.extended_request(args.path, args.method, body).to_dict()
        else:
            output = client.standard_request(args.path, args.method, body)
    except RequestClientError as e:
        logging.error(f"Request failed: {e}")
        return 1

    print(render(output, args.format))
    logging.info(f"Requests made: {client.request_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
