from pathlib import Path
from typing import List, Optional

import typer
import typer_di

from arnkit.engine.check_engine import check_arns

from .console import BOLD, CYAN, GREEN, GREY, RED, RESET, RULE, YELLOW
from ..output import emit
from ..params import output_params


def _print_report(report) -> None:
    print()
    print(RULE)
    print(f"{CYAN}{BOLD}ARN check{RESET}")
    print(RULE)
    for r in report.resources:
        if r.status == "valid":
            kind = f" {GREY}({r.service}/{r.kind}){RESET}" if r.kind else f" {GREY}({r.service}){RESET}"
            print(f"  {GREEN}✔{RESET} {r.arn}{kind}")
        else:
            print(f"  {RED}✘{RESET} {r.arn}")
            print(f"    {YELLOW}{r.error}:{RESET} {r.message}")
    print(RULE)
    summary = report.summary
    print(
        f"{BOLD}total={summary['total']}{RESET} "
        f"{GREEN}valid={summary['valid']}{RESET} "
        f"{RED}invalid={summary['invalid']}{RESET}"
    )
    print(RULE)
    print()


def check(
    arns: List[str] = typer.Option(
        None,
        "--arn",
        help="ARN(s) para validar. Pode repetir.",
    ),
    arn_file: Optional[Path] = typer.Option(
        None,
        "--arn-file",
        exists=True,
        dir_okay=False,
        help="Arquivo com um ARN por linha.",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save",
        help="Grava o relatório (YAML) neste arquivo.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Valida uma lista de ARNs e gera um relatório.

    Ex:
    arnkit check --arn arn:aws:s3:::bucket --arn-file arns.txt --save report.yaml

    Exit code 1 se algum ARN for inválido.
    """
    arns: List[str] = list(arns or [])
    if arn_file:
        arns.extend(arn_file.read_text(encoding="utf-8").splitlines())

    if not any(a.strip() for a in arns):
        raise typer.BadParameter("Você precisa passar pelo menos um --arn ou um --arn-file.")

    report = check_arns(arns)

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save.write_text(report.to_yaml(), encoding="utf-8")

    if not emit(report.to_dict(), output):
        _print_report(report)
        if save:
            print(f"{GREEN}{BOLD}Relatório salvo com sucesso.{RESET} {CYAN}{save}{RESET}")
            print()

    if report.summary["invalid"]:
        raise typer.Exit(code=1)
