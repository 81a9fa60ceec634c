import logging
import logging.config
import sys
from typing import Dict, List, Optional, Tuple

import click
import orjson

import plainwire
from plainwire.exceptions import ResponseWriteError
from plainwire.http_handler.http_response import build_response
from plainwire.http_handler.json_response import build_json_response
from plainwire.http_handler.response_sender import ResponseSender
from plainwire.http_handler.serialization import ResponseSerializer
from plainwire.http_handler.wire_settings import WireSettings

TRACE_LOG_LEVEL = 5
LOG_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE_LOG_LEVEL,
}
LOG_LEVEL_CHOICES = click.Choice(list(LOG_LEVELS.keys()))

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(levelname)s:     %(message)s",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "plainwire": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    },
}
LOGGER = logging.getLogger("plainwire")


def configure_logging(log_level: str):
    logging.addLevelName(TRACE_LOG_LEVEL, "TRACE")
    logging.config.dictConfig(LOGGING_CONFIG)
    LOGGER.setLevel(LOG_LEVELS[log_level])


def parse_header(header: str) -> Optional[Tuple[str, str]]:
    components = header.split(":", 1)
    if len(components) != 2:
        LOGGER.error(
            f"Invalid header, header should be a Name:Value pair. You passed: {header}"
        )
        return None
    return components[0], components[1]


def parse_headers(headers: List[str]) -> Optional[Dict[str, str]]:
    parsed_headers = {}
    for header in headers:
        parsed_header = parse_header(header)
        if parsed_header is None:
            return None
        name, value = parsed_header
        parsed_headers[name] = value
    return parsed_headers


def print_version(
    ctx: click.Context, param: click.Parameter, value: bool, click=click
) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"plainwire {plainwire.__version__}")
    ctx.exit()


@click.command()
@click.option(
    "--status",
    "status_code",
    type=str,
    default="200",
    show_default=True,
    help="Status code of the response.",
)
@click.option(
    "--header",
    "headers",
    multiple=True,
    help="Response header as a Name:Value pair. Replaces the default Content-Type.",
)
@click.option("--body", type=str, default=None, help="Response body.")
@click.option(
    "--json-body",
    type=str,
    default=None,
    help="JSON document to send as an application/json body.",
)
@click.option(
    "--legacy-content-length/--strict-content-length",
    default=True,
    show_default=True,
    help="Terminate the Content-Length line with ';' as older clients expect.",
)
@click.option(
    "--dump",
    is_flag=True,
    default=False,
    help="Print the response as JSON instead of the wire format.",
)
@click.option(
    "--log-level",
    type=LOG_LEVEL_CHOICES,
    default="warning",
    help="Log level.",
    show_default=True,
)
@click.option(
    "--version",
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
    help="Display the plainwire version and exit.",
)
def main(
    status_code: str,
    headers: List[str],
    body: Optional[str],
    json_body: Optional[str],
    legacy_content_length: bool,
    dump: bool,
    log_level: str,
):
    configure_logging(log_level)

    if body is not None and json_body is not None:
        LOGGER.error("--body and --json-body cannot be used together")
        sys.exit(1)

    parsed_headers = None
    if headers:
        parsed_headers = parse_headers(headers)
        if parsed_headers is None:
            sys.exit(1)

    if json_body is not None:
        try:
            payload = orjson.loads(json_body)
        except orjson.JSONDecodeError:
            LOGGER.error(f"Invalid JSON body: {json_body}")
            sys.exit(1)
        response = build_json_response(status_code, payload, headers=parsed_headers)
    else:
        response = build_response(status_code, headers=parsed_headers, body=body)

    if dump:
        click.echo(
            orjson.dumps(response.to_dict(), option=orjson.OPT_INDENT_2).decode(
                "utf-8"
            )
        )
        return

    response_sender = ResponseSender(
        ResponseSerializer(WireSettings(legacy_content_length=legacy_content_length))
    )
    try:
        response_sender.send_response(click.get_binary_stream("stdout"), response)
    except ResponseWriteError:
        sys.exit(1)
