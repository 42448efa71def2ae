import json
from typing import Any

import typer
import yaml

from arnkit.models import ArnError

from .commands.console import BOLD, MAGENTA, RED, RESET, RULE


def emit(data: Any, output: str) -> bool:
    """
    Imprime `data` em json/yaml. Devolve False quando o output é texto,
    para o comando fazer a própria formatação.
    """
    if output == "json":
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return True

    if output == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
        return True

    return False


def fail(error: ArnError, output: str) -> None:
    """
    Reporta um ArnError no formato pedido e encerra com código 1.
    """
    if emit(error.to_dict(), output):
        raise typer.Exit(code=1)

    print()
    print(RULE)
    print(f"{RED}{BOLD}INVALID ARN — {type(error).__name__}{RESET}")
    print(RULE)
    print(f"{MAGENTA}Detalhes:{RESET}")
    print(f"  {error}")
    if error.value is not None and error.position is not None:
        # aponta o caractere problemático embaixo do valor
        print(f"  {error.value}")
        print(f"  {' ' * error.position}{RED}^{RESET}")
    print(RULE)
    print()
    raise typer.Exit(code=1)
