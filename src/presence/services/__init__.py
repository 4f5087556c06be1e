"""Service layer — operations consumed by the CLI.

INVARIANT: All service-layer methods return ServiceResult.
"""

from presence.services.evaluate import EvaluateService
from presence.services.result import ServiceError, ServiceResult

__all__ = ["EvaluateService", "ServiceError", "ServiceResult"]
