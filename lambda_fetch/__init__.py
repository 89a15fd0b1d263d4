# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Download AWS Lambda function and layer artifacts by ARN."""

__version__ = "0.1.0"
