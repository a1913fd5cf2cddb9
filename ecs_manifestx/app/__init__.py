# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Package to describe the application, deployed as a CloudFormation stack and stack set.
"""
