# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Names of the application CloudFormation stack and stack set, and of their metadata.
These names are those of the deployed resources: changing them loses track of existing applications.
"""

LEGACY_APP_TEMPLATE_VERSION = "v0.0.0"
TEMPLATE_VERSION_KEY = "TemplateVersion"

APP_STACK_SOURCE = "stack"
APP_STACK_SET_SOURCE = "stack set"


def name_for_app_stack(app_name: str) -> str:
    return f"{app_name}-infrastructure-roles"


def name_for_app_stack_set(app_name: str) -> str:
    return f"{app_name}-infrastructure"
