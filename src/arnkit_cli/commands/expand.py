from pathlib import Path
from typing import List, Optional

import typer
import typer_di
import yaml

from arnkit.log_config import get_logger
from arnkit.merge import build_variables
from arnkit.models import ArnError
from arnkit.template_engine import expand_arn

from ..output import emit, fail
from ..params import output_params

logger = get_logger("cli.expand")


def expand(
    template: str = typer.Argument(
        ...,
        help="ARN com ${variáveis} no resource (ex.: arn:aws:iam::123456789012:user/${user}).",
    ),
    vars_file: Optional[Path] = typer.Option(
        None,
        "--vars-file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Arquivo YAML/JSON com as variáveis.",
    ),
    json_str: Optional[str] = typer.Option(
        None,
        "--overrides",
        help="Inline JSON com variáveis (ganha do arquivo).",
    ),
    assignments: List[str] = typer.Option(
        None,
        "--var",
        help="Variável name=value. Pode repetir; ganha de --overrides e do arquivo.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Expande as variáveis `${name}` de um ARN.

    Ex:
    arnkit expand 'arn:aws:s3:::${bucket}/${key}' --var bucket=data --var key=report.csv
    arnkit expand 'arn:aws:iam::123456789012:user/${user}' --vars-file vars.yaml

    Tudo ou nada: qualquer variável sem valor é erro (exit code 1).
    """
    try:
        variables = build_variables(
            vars_path=str(vars_file) if vars_file else None,
            overrides=json_str,
            assignments=assignments,
        )
    except (ValueError, yaml.YAMLError) as e:
        raise typer.BadParameter(str(e)) from e

    logger.debug("cli.expand", template=template, variables=sorted(variables))

    try:
        arn = expand_arn(template, variables)
    except ArnError as e:
        fail(e, output)

    if emit({"template": template, "arn": str(arn)}, output):
        return

    typer.echo(str(arn))
