"""
Usage endpoints - liveness and recent usage of a single key.
"""

from django.http import HttpRequest
from ninja import Query, Router

from apps.keys.models import ApiKey
from core.errors import UnknownKeyId
from .ledger import UsageLedger
from .liveness import LivenessEvaluator
from .schemas import KeyUsageOut, UsageEventOut

router = Router()


@router.get("/{key_id}/usage", response=KeyUsageOut)
def get_key_usage(request: HttpRequest, key_id: int, limit: int = Query(50, ge=0)):
    """Status, total usage count and most recent events for a key."""
    if not ApiKey.objects.filter(id=key_id).exists():
        raise UnknownKeyId()

    ledger = UsageLedger()
    return KeyUsageOut(
        keyId=key_id,
        status=LivenessEvaluator(ledger).status_of(key_id),
        usageCount=ledger.count_for(key_id),
        recentUsage=[UsageEventOut.from_orm(event) for event in ledger.events_for(key_id, limit)],
    )
