from typing import List

import typer
import typer_di

from arnkit.arn import ResourceName
from arnkit.log_config import get_logger
from arnkit.models import ArnError

from .console import BOLD, CYAN, GREY, RESET, RULE
from ..output import emit, fail
from ..params import output_params

logger = get_logger("cli.parse")


def _describe(arn: ResourceName) -> dict:
    data = arn.to_dict()
    data["partition_or_default"] = str(arn.partition_or_default)
    data["variables"] = list(arn.resource.variable_names())
    return data


def _print_arn(arn: ResourceName) -> None:
    def show(value):
        return value if value else f"{GREY}(any){RESET}"

    print(RULE)
    print(f"{CYAN}{BOLD}{arn}{RESET}")
    print(RULE)
    print(f"{CYAN}{BOLD}PARTITION:{RESET} {show(arn.partition)}")
    print(f"{CYAN}{BOLD}SERVICE:  {RESET} {arn.service}")
    print(f"{CYAN}{BOLD}REGION:   {RESET} {show(arn.region)}")
    print(f"{CYAN}{BOLD}ACCOUNT:  {RESET} {show(arn.account_id)}")
    print(f"{CYAN}{BOLD}RESOURCE: {RESET} {arn.resource}")
    if arn.has_variables():
        print(f"{CYAN}{BOLD}VARIABLES:{RESET} {', '.join(arn.resource.variable_names())}")
    print()


def parse(
    arns: List[str] = typer.Argument(
        ...,
        help="ARN(s) para decompor nos campos.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Faz o parse de um ou mais ARNs e mostra os campos.

    Ex:
    arnkit parse arn:aws:s3:::mythings/thing-1
    arnkit parse arn:aws:iam::123456789012:user/alice --json

    Para no primeiro ARN inválido (exit code 1).
    """
    parsed: List[ResourceName] = []
    for raw in arns:
        logger.debug("cli.parse", arn=raw)
        try:
            parsed.append(ResourceName.parse(raw))
        except ArnError as e:
            fail(e, output)

    payload = [_describe(arn) for arn in parsed]
    if emit(payload[0] if len(payload) == 1 else payload, output):
        return

    print()
    for arn in parsed:
        _print_arn(arn)
