from enum import Enum
from typing import Optional

import typer


class OutputFormat(str, Enum):
    text = "text"
    json = "json"
    yaml = "yaml"


def output_params(
    output: Optional[OutputFormat] = typer.Option(
        None,
        "--output",
        "-o",
        case_sensitive=False,
        help="Output format: text (default), json ou yaml.",
    ),
    out_json: bool = typer.Option(False, "--json", help="Alias para --output json"),
    out_yaml: bool = typer.Option(False, "--yaml", help="Alias para --output yaml"),
    out_text: bool = typer.Option(False, "--text", help="Alias para --output text"),
) -> str:
    """
    Dependência compartilhada pelos comandos: resolve --output e os aliases
    num único formato. Mais de uma opção ao mesmo tempo é erro de uso.
    """
    chosen = [
        fmt
        for flag, fmt in (
            (out_json, OutputFormat.json),
            (out_yaml, OutputFormat.yaml),
            (out_text, OutputFormat.text),
            (output is not None, output),
        )
        if flag
    ]

    if len(chosen) > 1:
        raise typer.BadParameter(
            "Use apenas uma opção de output: --json, --yaml, --text ou --output."
        )

    return (chosen[0] if chosen else OutputFormat.text).value
