from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List

from ..arn import ResourceName
from ..builders import get_builder_for_arn
from ..log_config import get_logger
from ..models import ArnError, CheckedArn, CheckReport

logger = get_logger("check_engine")


def check_arn(arn: str) -> CheckedArn:
    """
    Valida um único ARN. Nunca levanta ArnError: a falha vira um CheckedArn
    com status 'invalid', tipo do erro, mensagem e posição.
    """
    try:
        parsed = ResourceName.parse(arn)
    except ArnError as e:
        logger.info("arn.rejected", arn=arn, error=type(e).__name__, position=e.position)
        return CheckedArn(
            arn=arn,
            status="invalid",
            error=type(e).__name__,
            message=str(e),
            position=e.position,
        )

    builder_cls = get_builder_for_arn(parsed)
    kind = builder_cls.resource_kind(parsed) if builder_cls else None

    logger.debug("arn.checked", arn=arn, service=str(parsed.service), kind=kind)

    return CheckedArn(
        arn=arn,
        status="valid",
        service=str(parsed.service),
        kind=kind,
    )


def check_arns(arns: Iterable[str]) -> CheckReport:
    """
    Valida uma lista de ARNs e gera um relatório com resumo.

    Linhas vazias (ou só espaços) são ignoradas; o resto é checado como veio,
    sem strip, porque espaço dentro de um ARN é erro.
    """
    resources: List[CheckedArn] = [check_arn(arn) for arn in arns if arn.strip()]

    total = len(resources)
    invalid = sum(1 for r in resources if r.status == "invalid")
    valid = total - invalid

    return CheckReport(
        checked_at=datetime.now(timezone.utc).isoformat(),
        summary={
            "total": total,
            "valid": valid,
            "invalid": invalid,
        },
        resources=resources,
    )
