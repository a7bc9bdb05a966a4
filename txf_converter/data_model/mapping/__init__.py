# txf_converter/data_model/mapping/__init__.py
from .organization_mapping import (
    LARGE_CONTRIBUTION_THRESHOLD,
    ORGANIZATION_NAME_LIMIT,
    OrganizationMapping,
    TxfConfig,
    payee_key,
)
from .resolved_transaction import ResolvedTransaction

__all__ = [
    "LARGE_CONTRIBUTION_THRESHOLD",
    "ORGANIZATION_NAME_LIMIT",
    "OrganizationMapping",
    "ResolvedTransaction",
    "TxfConfig",
    "payee_key",
]
