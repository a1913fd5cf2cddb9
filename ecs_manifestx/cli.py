# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Console script for ecs_manifestx.
"""

import argparse
import logging
import sys

from ecs_manifestx import __version__
from ecs_manifestx.app.app_metadata import CloudFormationMetadataProvider
from ecs_manifestx.app.app_version import reconcile_app_version
from ecs_manifestx.common.aws import define_session
from ecs_manifestx.common.logging import LOG
from ecs_manifestx.common.settings import DeploymentContext
from ecs_manifestx.ecs.container_definitions import ALLOWED_FORMATS, render_manifest
from ecs_manifestx.exceptions import ManifestXBaseException
from ecs_manifestx.workload.workload import load_workload_file

COMMAND_ARG = "command"
RENDER_COMMAND = "render"
APP_VERSION_COMMAND = "app-version"

COMMANDS = [
    {
        "name": RENDER_COMMAND,
        "help": "Compiles the workload logging and sidecars into ECS container definitions",
    },
    {
        "name": APP_VERSION_COMMAND,
        "help": "Gets the template version of the application from its stack and stack set",
    },
    {"name": "version", "help": "ECS Manifest-X Version"},
]


def main_parser():
    """
    Console script for ecs_manifestx.
    """
    parser = argparse.ArgumentParser()
    cmd_parsers = parser.add_subparsers(dest=COMMAND_ARG, help="Command to execute.")
    base_command_parser = argparse.ArgumentParser(add_help=False)
    base_command_parser.add_argument(
        "--region",
        required=False,
        dest=DeploymentContext.region_arg,
        help="Region of the deployment. Defaults to the region of the stack (AWS::Region) "
        "for render, and to the default region from config or environment vars for API calls",
    )
    base_command_parser.add_argument(
        "--loglevel", type=str, help="Log level. Defaults to INFO", required=False
    )

    render_parser = cmd_parsers.add_parser(
        name=COMMANDS[0]["name"],
        help=COMMANDS[0]["help"],
        parents=[base_command_parser],
    )
    render_parser.add_argument(
        "-f",
        "--workload-file",
        dest="WorkloadFile",
        required=True,
        help="Path to the workload definition file",
    )
    render_parser.add_argument(
        "--format",
        help="Defines the format you want to use.",
        type=str,
        dest="OutputFormat",
        choices=ALLOWED_FORMATS,
        default="yaml",
    )
    render_parser.add_argument(
        "--log-group",
        dest=DeploymentContext.log_group_arg,
        required=False,
        help="Name of the log group. Defaults to the LogGroup resource of the stack",
    )
    render_parser.add_argument(
        "--stream-prefix",
        dest=DeploymentContext.stream_prefix_arg,
        required=False,
        help="awslogs stream prefix. Defaults to copilot",
    )

    version_parser = cmd_parsers.add_parser(
        name=COMMANDS[1]["name"],
        help=COMMANDS[1]["help"],
        parents=[base_command_parser],
    )
    version_parser.add_argument(
        "-n",
        "--name",
        help="Name of the application",
        required=True,
        type=str,
        dest="AppName",
    )
    version_parser.add_argument(
        "--role-arn",
        dest="RoleArn",
        help="Allow you to run API calls using a specific IAM role, within same or for cross-account",
        required=False,
    )
    cmd_parsers.add_parser(name=COMMANDS[2]["name"], help=COMMANDS[2]["help"])
    return parser


def set_log_level(loglevel: str) -> None:
    valid_levels = [
        "FATAL",
        "CRITICAL",
        "ERROR",
        "WARNING",
        "WARN",
        "INFO",
        "DEBUG",
    ]
    if loglevel.upper() in valid_levels:
        LOG.setLevel(logging.getLevelName(loglevel.upper()))
    else:
        print(f"Log level value {loglevel} is invalid. Must me one of {valid_levels}")


def render(kwargs: dict) -> str:
    workload = load_workload_file(kwargs["WorkloadFile"])
    context = DeploymentContext.from_kwargs(kwargs)
    return render_manifest(
        workload.container_definitions(context), output_format=kwargs["OutputFormat"]
    )


def app_version(kwargs: dict) -> str:
    session = define_session(
        region_name=kwargs.get(DeploymentContext.region_arg),
        role_arn=kwargs.get("RoleArn"),
    )
    return reconcile_app_version(
        kwargs["AppName"], CloudFormationMetadataProvider(session)
    )


def main(argv: list = None):
    """
    Main entry point for CLI
    :return: status code
    """
    parser = main_parser()
    if argv is None and len(sys.argv) == 1:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)
    kwargs = vars(args)
    if kwargs.get("loglevel"):
        set_log_level(kwargs["loglevel"])
    LOG.debug(args)
    if kwargs[COMMAND_ARG] == "version":
        print(__version__)
        return 0
    try:
        if kwargs[COMMAND_ARG] == RENDER_COMMAND:
            print(render(kwargs))
        elif kwargs[COMMAND_ARG] == APP_VERSION_COMMAND:
            print(app_version(kwargs))
        else:
            parser.print_help()
    except ManifestXBaseException as error:
        LOG.error(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())  # pragma: no cover
