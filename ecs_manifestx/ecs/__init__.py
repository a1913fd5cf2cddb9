# SPDX-License-Identifier: MPL-2.0
# Copyright 2020-2022 John Mille <john@compose-x.io>

"""
Package to compile the workload logging and sidecars into ECS container definitions.
"""
