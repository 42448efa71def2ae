from .models import (
    AccountIdentifier,
    ArnError,
    IncompleteArnError,
    Identifier,
    InvalidAccountIdError,
    InvalidIdentifierError,
    InvalidPartitionError,
    InvalidRecordError,
    InvalidRegionError,
    InvalidResourceError,
    InvalidServiceError,
    MissingPrefixError,
    MissingResourceError,
    ResourceIdentifier,
    TooFewFieldsError,
    UnboundVariableError,
)
from .arn import DEFAULT_PARTITION, ResourceName
from .builder import ArnBuilder, ResourceBuilder
from .known import Partition, Region, Service

__all__ = [
    "AccountIdentifier",
    "ArnBuilder",
    "ArnError",
    "DEFAULT_PARTITION",
    "IncompleteArnError",
    "Identifier",
    "InvalidAccountIdError",
    "InvalidIdentifierError",
    "InvalidPartitionError",
    "InvalidRecordError",
    "InvalidRegionError",
    "InvalidResourceError",
    "InvalidServiceError",
    "MissingPrefixError",
    "MissingResourceError",
    "Partition",
    "Region",
    "ResourceBuilder",
    "ResourceIdentifier",
    "ResourceName",
    "Service",
    "TooFewFieldsError",
    "UnboundVariableError",
]
