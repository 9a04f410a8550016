from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from typing import List
from .. import schemas
from ..export import EmptyExportError, export_filename, materials_to_csv
from ..ledger import LedgerError, MaterialLedger, get_ledger

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("/", response_model=List[schemas.Material])
def list_materials(ledger: MaterialLedger = Depends(get_ledger)):
    """Current project ledger, newest first."""
    return ledger.materials


@router.post("/", response_model=schemas.Material)
def create_material(material: schemas.MaterialCreate, ledger: MaterialLedger = Depends(get_ledger)):
    try:
        return ledger.add(material)
    except LedgerError as e:
        raise HTTPException(status_code=502, detail=f"Sync Error: {e}")


@router.delete("/")
def clear_materials(confirm: bool = Query(False), ledger: MaterialLedger = Depends(get_ledger)):
    """Wipe every material from the project. Requires ?confirm=true."""
    if not confirm:
        raise HTTPException(
            status_code=400,
            detail="This will wipe all LEED data for this project. Pass ?confirm=true to proceed.",
        )
    try:
        removed = ledger.clear()
    except LedgerError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"ok": True, "removed": removed}


@router.get("/sync-status", response_model=schemas.SyncState)
def sync_status(ledger: MaterialLedger = Depends(get_ledger)):
    return {"status": ledger.sync.status}


@router.get("/export")
def export_materials(ledger: MaterialLedger = Depends(get_ledger)):
    """Download the ledger as a CSV audit file."""
    try:
        content = materials_to_csv(ledger.materials)
    except EmptyExportError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"',
        },
    )


@router.get("/{material_id}", response_model=schemas.Material)
def get_material(material_id: str, ledger: MaterialLedger = Depends(get_ledger)):
    material = ledger.get(material_id)
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")
    return material


@router.delete("/{material_id}")
def delete_material(material_id: str, ledger: MaterialLedger = Depends(get_ledger)):
    try:
        deleted = ledger.remove(material_id)
    except LedgerError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Material not found")
    return {"ok": True, "id": material_id}
