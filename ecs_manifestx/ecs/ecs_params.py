# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Names and values shared by the container definitions.
The container and variable names are used as-is by the services reading them at runtime,
do not change them.
"""

FIRELENS_ROUTER_NAME = "firelens_log_router"
FIRELENS_TYPE = "fluentbit"
FIRELENS_CONFIG_FILE_TYPE = "file"
DEFAULT_FLUENTBIT_IMAGE = "public.ecr.aws/aws-observability/aws-for-fluent-bit:latest"

MOUNT_POINTS_ENV_VAR = "COPILOT_MOUNT_POINTS"

ENABLE_METADATA_OPTION = "enable-ecs-log-metadata"
CONFIG_FILE_TYPE_OPTION = "config-file-type"
CONFIG_FILE_VALUE_OPTION = "config-file-value"

DEFAULT_PROTOCOL = "tcp"
