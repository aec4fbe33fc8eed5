# Copyright contributors to the cri-status project. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import argparse
import logging
import sys

import uvicorn

from cri_status.app.config import load_app_config
from cri_status.app.server import create_app
from cri_status.common import log
from cri_status.errors import StatusError
from cri_status.models.status import StatusRequest
from cri_status.status_service import StatusService

logger = logging.getLogger(__name__)


def show_status(args):
    app_config = load_app_config(args.config)
    service = StatusService.from_config(app_config)
    try:
        response = service.status(StatusRequest(verbose=args.info))
    except StatusError as e:
        logger.error(f"Failed to get status: {e}")
        return 1
    print(response.model_dump_json(indent=2))
    return 0


def serve(args):
    app_config = load_app_config(args.config)
    host = args.host if args.host else app_config.host
    port = args.port if args.port else app_config.port
    service = StatusService.from_config(app_config)
    logger.info(f"Serving runtime status on {host}:{port}")
    uvicorn.run(create_app(service), host=host, port=port)
    return 0


def main():
    parser = argparse.ArgumentParser(description="CRI runtime status reporter")
    parser.add_argument("-v", "--verbose", help="Display verbose output", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_status = subparsers.add_parser("status", description="Print the runtime status", help="see `status -h`")
    parser_status.add_argument("-c", "--config", type=str, help="Path to the application configuration.")
    parser_status.add_argument("--info", action="store_true", help="Include the runtime configuration in the output.")

    parser_serve = subparsers.add_parser("serve", description="Serve the runtime status over HTTP", help="see `serve -h`")
    parser_serve.add_argument("-c", "--config", type=str, help="Path to the application configuration.")
    parser_serve.add_argument("--host", type=str, help="The hostname or IP address to bind (default: from the configuration).")
    parser_serve.add_argument("--port", type=int, help="The port number to bind (default: from the configuration).")

    args = parser.parse_args()

    if args.verbose > 0:
        log.init(logging.DEBUG)
    else:
        log.init()

    if args.command == "status":
        sys.exit(show_status(args))
    elif args.command == "serve":
        sys.exit(serve(args))


if __name__ == "__main__":
    main()
