from enum import Enum
from typing import List, Optional

import typer
import typer_di

from arnkit.known import Partition, Region, Service, available_partitions, available_regions

from .console import GREEN, RESET
from ..output import emit
from ..params import output_params


class KnownKind(str, Enum):
    partitions = "partitions"
    regions = "regions"
    services = "services"


def known(
    kind: KnownKind = typer.Argument(
        ...,
        help="O que listar: partitions, regions ou services.",
    ),
    installed: bool = typer.Option(
        False,
        "--installed",
        help="Usa os dados de endpoints do botocore instalado (partitions/regions).",
    ),
    service: Optional[str] = typer.Option(
        None,
        "--service",
        help="Serviço para filtrar regions (requer --installed).",
    ),
    partition: str = typer.Option(
        Partition.AWS.value,
        "--partition",
        help="Partition das regions (com --installed).",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Lista valores conhecidos de partition, region e service.

    Ex:
    arnkit known regions
    arnkit known regions --installed --service lambda --partition aws-cn
    """
    if service and not installed:
        raise typer.BadParameter("--service só faz sentido junto com --installed.")

    values: List[str]
    if kind is KnownKind.partitions:
        values = available_partitions() if installed else Partition.values()
    elif kind is KnownKind.regions:
        if installed:
            if not service:
                raise typer.BadParameter("Informe --service para listar as regions instaladas.")
            values = available_regions(service, partition)
        else:
            values = Region.values()
    else:
        if installed:
            raise typer.BadParameter("--installed não se aplica a services.")
        values = Service.values()

    if emit(values, output):
        return

    for value in values:
        print(f"  {GREEN}•{RESET} {value}")
