# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Precondition violations raised before any hashing starts."""


class KeccakError(RuntimeError):
    """A prototype for all errors raised by this package."""


class MalformedLength(KeccakError):
    """A bit sequence has a length that the construction cannot accept."""


class UnsupportedOutputLength(KeccakError):
    """The requested digest does not fit into a single squeeze."""


class InputTooLong(KeccakError):
    """The input exceeds the configured maximum length."""


class NonBooleanBits(KeccakError):
    """A bit sequence contains a value other than 0 or 1."""
