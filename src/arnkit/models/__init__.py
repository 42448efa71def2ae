from .ArnError import (
    ArnError,
    IncompleteArnError,
    InvalidAccountIdError,
    InvalidIdentifierError,
    InvalidPartitionError,
    InvalidRecordError,
    InvalidRegionError,
    InvalidResourceError,
    InvalidServiceError,
    MissingPrefixError,
    MissingResourceError,
    TooFewFieldsError,
    UnboundVariableError,
)
from .Identifier import IDENTIFIER_CHARS, Identifier, IdentifierLike
from .AccountIdentifier import AccountIdentifier
from .ResourceIdentifier import LiteralSegment, ResourceIdentifier, Segment, Separator, VariableSegment
from .CheckReport import CheckedArn, CheckReport

__all__ = [
    "AccountIdentifier",
    "ArnError",
    "CheckedArn",
    "CheckReport",
    "IDENTIFIER_CHARS",
    "Identifier",
    "IdentifierLike",
    "IncompleteArnError",
    "InvalidAccountIdError",
    "InvalidIdentifierError",
    "InvalidPartitionError",
    "InvalidRecordError",
    "InvalidRegionError",
    "InvalidResourceError",
    "InvalidServiceError",
    "LiteralSegment",
    "MissingPrefixError",
    "MissingResourceError",
    "ResourceIdentifier",
    "Segment",
    "Separator",
    "TooFewFieldsError",
    "UnboundVariableError",
    "VariableSegment",
]
