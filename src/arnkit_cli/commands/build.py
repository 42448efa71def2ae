from typing import Optional

import typer
import typer_di

from arnkit.builder import ArnBuilder
from arnkit.log_config import get_logger
from arnkit.models import AccountIdentifier, ArnError, Identifier, ResourceIdentifier

from ..output import emit, fail
from ..params import output_params

logger = get_logger("cli.build")


def build(
    service: str = typer.Option(
        ...,
        "--service",
        "-s",
        help="Namespace do serviço (ex.: s3, iam, lambda).",
    ),
    resource: str = typer.Option(
        ...,
        "--resource",
        "-r",
        help="Resource (ex.: user/alice, function:my-fn). Aceita ${variáveis}.",
    ),
    partition: Optional[str] = typer.Option(
        None,
        "--partition",
        help="Partition (ex.: aws, aws-cn). Vazio = qualquer.",
    ),
    default_partition: bool = typer.Option(
        False,
        "--default-partition",
        help="Usa a partition padrão (aws).",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="Region, e.g. sa-east-1.",
    ),
    account: Optional[str] = typer.Option(
        None,
        "--account",
        help="Account ID de 12 dígitos.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Monta um ARN a partir dos campos, validando cada um.

    Ex:
    arnkit build --service iam --account 123456789012 --resource user/alice
    arnkit build -s lambda --region us-east-2 --account 123456789012 -r layer:my-layer:3
    """
    if partition and default_partition:
        raise typer.BadParameter("Use apenas uma opção: --partition ou --default-partition.")

    logger.debug("cli.build", service=service, resource=resource)

    try:
        builder = ArnBuilder.service_id(Identifier.parse(service)).resource(
            ResourceIdentifier.parse(resource)
        )
        if partition:
            builder.in_partition_id(Identifier.parse(partition))
        elif default_partition:
            builder.in_default_partition()
        if region:
            builder.in_region_id(Identifier.parse(region))
        if account:
            builder.owned_by(AccountIdentifier.parse(account))
        arn = builder.build()
    except ArnError as e:
        fail(e, output)

    if emit({"arn": str(arn), **arn.to_dict()}, output):
        return

    typer.echo(str(arn))
