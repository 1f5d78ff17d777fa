from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class SearchResult:
    solution: List[int] = field(default_factory=list)
    elapsed: float = 0.0
    message: Optional[str] = None
    iterations: Optional[int] = None

    @property
    def found(self) -> bool:
        return len(self.solution) > 0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0
