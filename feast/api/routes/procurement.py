from fastapi import APIRouter, Depends

from feast.api.dependencies import get_procurement_repository
from feast.infra.Procurement_Repository import ProcurementRepository
from feast.logic.procurement.summary import summarize_procurement

router = APIRouter(prefix="/api/admin/procurement", tags=["procurement"])


@router.get("/{event_id}")
def get_procurement(event_id: str, repo: ProcurementRepository = Depends(get_procurement_repository)):
    """Ordered and received quantities per menu item, from the event's purchase orders."""
    summary = summarize_procurement(repo.lines_for_event(event_id))
    return {"procurement": [p.to_dict() for p in summary]}
