"""Data types and dataclasses for safe-predeployments."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RegistryEntry:
    """A chain as listed in the public chain registry."""

    chain_id: int
    name: Optional[str] = None
    rpc: List[str] = field(default_factory=list)  # Endpoint URLs, in registry order


@dataclass
class VerificationOutcome:
    """Result of checking the factory through an RPC endpoint."""

    chain_id: int
    code_size: int  # Runtime bytecode length in bytes
    codehash: str


@dataclass
class RunSummary:
    """Outcome of a single pipeline run."""

    message: str  # Plain-text description
    comment: str  # Markdown comment for pull request bots
    success: bool
    cause: Optional[str] = None  # FailureCause value, failures only

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "commentOutput": self.comment,
            "message": self.message,
            "success": self.success,
        }
        if self.cause is not None:
            data["cause"] = self.cause
        return data
