# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Errors - Metal
"""


class InvalidArgumentError(TypeError):
    """Raised when a utility receives an argument it cannot operate on."""
