import yaml

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class CheckedArn:
    arn: str
    status: str  # 'valid' | 'invalid'
    service: Optional[str] = None
    kind: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
    position: Optional[int] = None


@dataclass
class CheckReport:
    checked_at: str
    summary: Dict[str, int]
    resources: List[CheckedArn]

    def to_dict(self) -> dict:
        return {
            "checked_at": self.checked_at,
            "summary": self.summary,
            "resources": [
                {
                    "arn": r.arn,
                    "status": r.status,
                    **({"service": r.service} if r.service else {}),
                    **({"kind": r.kind} if r.kind else {}),
                    **({"error": r.error, "message": r.message} if r.error else {}),
                    **({"position": r.position} if r.position is not None else {}),
                }
                for r in self.resources
            ],
        }

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)
