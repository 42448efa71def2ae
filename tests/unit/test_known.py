import pytest

from arnkit import known
from arnkit.known import Partition, Region, Service
from arnkit.models import Identifier


def test_known_values_convert_to_identifiers():
    assert Service.S3.to_identifier() == Identifier("s3")
    assert Service.from_identifier(Identifier("lambda")) is Service.LAMBDA
    assert str(Region.US_EAST_1) == "us-east-1"
    assert Partition.default() is Partition.AWS


def test_known_values_are_valid_identifiers():
    for enum in (Partition, Region, Service):
        for value in enum.values():
            assert Identifier.is_valid(value), value


def test_unknown_value_is_rejected_by_enum_only():
    with pytest.raises(ValueError):
        Service.from_identifier(Identifier("not-a-service"))

    # o core continua aceitando qualquer Identifier
    assert Identifier("not-a-service").as_str() == "not-a-service"


class _FakeSession:
    def get_available_partitions(self):
        return ["aws", "aws-cn"]

    def get_available_regions(self, service, partition_name="aws"):
        if service == "lambda" and partition_name == "aws-cn":
            return ["cn-north-1", "cn-northwest-1"]
        return []


def test_available_partitions_and_regions(monkeypatch):
    monkeypatch.setattr(known, "Session", _FakeSession)

    assert known.available_partitions() == ["aws", "aws-cn"]
    assert known.available_regions("lambda", "aws-cn") == ["cn-north-1", "cn-northwest-1"]
    assert known.available_regions("unknown") == []
