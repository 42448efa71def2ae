import typer_di

from arnkit.builders import load_builders
from arnkit.builders.base import BaseServiceBuilder

from .console import BOLD, CYAN, GREEN, GREY, RESET, RULE
from ..output import emit
from ..params import output_params


def builders(output: str = typer_di.Depends(output_params)) -> None:
    """
    Lista os builders de serviço registrados.
    """
    # Garante que todos os módulos de builders foram importados
    load_builders()

    builders_list = [
        {
            "name": builder.__name__,
            "service": builder.service,
            "resource_types": list(builder.resource_types),
        }
        for builder in sorted(BaseServiceBuilder.registry, key=lambda c: c.__name__.lower())
    ]

    if emit(builders_list, output):
        return

    print()
    print(RULE)
    print(f"{CYAN}{BOLD}Registered Builders:{RESET}")
    print(RULE)
    print()
    if not builders_list:
        print("  (none registered)")
        print()
        return

    for builder in builders_list:
        meta = f"service={builder['service']}"
        if builder["resource_types"]:
            meta += f", resource_types={','.join(builder['resource_types'])}"
        print(f"  {GREEN}•{RESET} {builder['name']:<32} {GREY}({meta}){RESET}")

    print()
    print(RULE)
    print()
